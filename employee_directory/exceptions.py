"""
Custom exception classes for the employee directory.

Provides specific exceptions for data source errors.
"""

from typing import Any, Dict, Optional


class EmployeeDirectoryException(Exception):
    """
    Base exception for all employee directory errors.

    All custom exceptions should inherit from this class
    for consistent error handling.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize employee directory exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DuplicateEmployeeIdException(EmployeeDirectoryException):
    """Raised when a data source holds two employees with the same id."""

    def __init__(
        self,
        employee_id: int,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.employee_id = employee_id
        message = f"Duplicate employee id: {employee_id}"
        super().__init__(message, details)
