"""
Tests for custom exception classes.
"""

from employee_directory.exceptions import (
    DuplicateEmployeeIdException,
    EmployeeDirectoryException,
)


def test_employee_directory_exception_basic() -> None:
    """
    Test basic EmployeeDirectoryException initialization.

    Verifies that the base exception can be created with just a message.
    """
    exc = EmployeeDirectoryException("Test error")

    assert exc.message == "Test error"
    assert exc.details == {}
    assert str(exc) == "Test error"


def test_employee_directory_exception_with_details() -> None:
    details = {"code": "ERR001"}
    exc = EmployeeDirectoryException("Test error", details=details)

    assert exc.details["code"] == "ERR001"


def test_duplicate_employee_id_exception() -> None:
    exc = DuplicateEmployeeIdException(42)

    assert isinstance(exc, EmployeeDirectoryException)
    assert exc.employee_id == 42
    assert exc.message == "Duplicate employee id: 42"
    assert exc.details == {}
