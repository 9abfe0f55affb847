"""
Shared dependencies for the application.

Provides dependency injection functions used by the routes. Every request
gets its own repository and service instances.
"""

from fastapi import Depends

from .repositories.employee_repository import IEmployeeRepository
from .repositories.memory_repository import InMemoryEmployeeRepository
from .services.employee_service import EmployeeService


def get_employee_repository() -> IEmployeeRepository:
    """Create the employee data source for the current request."""
    return InMemoryEmployeeRepository()


def get_employee_service(
    repository: IEmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    """Create the employee service for the current request."""
    return EmployeeService(repository)
