"""
In-memory employee repository.

Serves a fixed demonstration data set. Stands in for a real data source.
"""

from datetime import date
from typing import Iterable, List, Optional

from ..domain.entities import Employee
from ..exceptions import DuplicateEmployeeIdException
from ..logging_config import get_logger
from .employee_repository import IEmployeeRepository

logger = get_logger(__name__)


def default_employees() -> List[Employee]:
    """
    Build the demonstration data set.

    The records cover a fully populated employee, one without a title,
    and one without registration date or office address.
    """
    return [
        Employee(
            id=1,
            title="Mr",
            name="Simon",
            age=32,
            registration_date=date(2015, 12, 5),
        ),
        Employee(
            id=2,
            title=None,
            name="David",
            age=35,
            registration_date=date(2013, 3, 15),
            office_address="123 ABC Street",
        ),
        Employee(
            id=3,
            title="Mr",
            name="Peter",
            age=29,
        ),
    ]


class InMemoryEmployeeRepository(IEmployeeRepository):
    """
    Repository backed by a list held in memory.

    Each instance owns its own copy of the data, so instances created
    for separate requests share nothing.
    """

    def __init__(self, employees: Optional[Iterable[Employee]] = None) -> None:
        """
        Initialize repository.

        Args:
            employees: Records to serve, defaults to the demonstration set

        Raises:
            DuplicateEmployeeIdException: If two records share an id
        """
        records = list(employees) if employees is not None else default_employees()

        seen = set()
        for employee in records:
            if employee.id in seen:
                raise DuplicateEmployeeIdException(
                    employee.id, details={"record_count": len(records)}
                )
            seen.add(employee.id)

        self._employees = records

    def list_employees(self) -> List[Employee]:
        logger.debug(f"Listing {len(self._employees)} employees from memory")
        return list(self._employees)
