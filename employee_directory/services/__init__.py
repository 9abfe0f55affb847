"""Application services."""

from .employee_service import EmployeeService, map_employees

__all__ = ["EmployeeService", "map_employees"]
