"""Repository layer for employee data access."""

from .employee_repository import IEmployeeRepository
from .memory_repository import InMemoryEmployeeRepository, default_employees

__all__ = [
    "IEmployeeRepository",
    "InMemoryEmployeeRepository",
    "default_employees",
]
