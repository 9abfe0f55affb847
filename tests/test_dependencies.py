"""
Tests for per-request dependency providers.
"""

from employee_directory.dependencies import (
    get_employee_repository,
    get_employee_service,
)
from employee_directory.repositories.memory_repository import (
    InMemoryEmployeeRepository,
)
from employee_directory.services.employee_service import EmployeeService


def test_repository_is_fresh_per_call() -> None:
    first = get_employee_repository()
    second = get_employee_repository()

    assert isinstance(first, InMemoryEmployeeRepository)
    assert first is not second


def test_service_wraps_given_repository() -> None:
    repository = get_employee_repository()

    service = get_employee_service(repository)

    assert isinstance(service, EmployeeService)
    assert service.repository is repository


def test_service_is_fresh_per_call() -> None:
    repository = get_employee_repository()
    assert get_employee_service(repository) is not get_employee_service(repository)
