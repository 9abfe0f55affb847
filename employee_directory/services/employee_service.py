"""
Employee service.

Pulls employee records from a repository and projects them into
view records for the presentation layer.
"""

from typing import Iterable, List

from ..domain.entities import Employee, EmployeeModel
from ..domain.projection import to_employee_model
from ..logging_config import get_logger
from ..repositories.employee_repository import IEmployeeRepository

logger = get_logger(__name__)


def map_employees(employees: Iterable[Employee]) -> List[EmployeeModel]:
    """
    Project every employee, preserving input order.

    Args:
        employees: Domain records in source order

    Returns:
        One view record per input record, in the same order
    """
    return [to_employee_model(employee) for employee in employees]


class EmployeeService:
    """Application service exposing employees to the views."""

    def __init__(self, repository: IEmployeeRepository) -> None:
        """
        Initialize employee service.

        Args:
            repository: Source of employee records
        """
        self.repository = repository

    def get_employees(self) -> List[EmployeeModel]:
        """
        Get all employees as view records.

        Returns:
            Projected employees in repository order
        """
        models = map_employees(self.repository.list_employees())
        logger.debug(
            "Projected employees for view",
            extra={"extra_fields": {"employee_count": len(models)}},
        )
        return models
