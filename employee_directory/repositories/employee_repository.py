"""
Employee repository interface (Abstract Base Class).

Defines the contract for employee data retrieval
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List

from ..domain.entities import Employee


class IEmployeeRepository(ABC):
    """
    Abstract repository interface for employee data.

    Consumers must treat the result as an opaque ordered sequence and
    make no assumption about its size or content.
    """

    @abstractmethod
    def list_employees(self) -> List[Employee]:
        """
        Return all employees in source order.

        Returns:
            List of employee records
        """
        pass
