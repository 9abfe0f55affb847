"""
Domain entities for employee data.

Core records representing employees as stored upstream and as exposed
to the presentation layer. These entities are framework-agnostic.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """
    Employee record as held by the data source.

    Attributes:
        id: Unique identifier within a data source
        title: Honorific such as "Mr", may be missing
        name: Display name
        age: Age in years, may be missing
        registration_date: Date the employee was registered
        office_address: Postal address of the employee's office
    """

    id: int
    title: Optional[str]
    name: str
    age: Optional[int] = None
    registration_date: Optional[date] = None
    office_address: Optional[str] = None


@dataclass(frozen=True)
class EmployeeModel:
    """
    Employee record as rendered by the views.

    ``registration_date`` is declared so the view can show the column,
    but projection never fills it in.
    """

    id: int
    title: str
    name: str
    age: Optional[int] = None
    registration_date: Optional[date] = None
    work_address: Optional[str] = None


@dataclass(frozen=True)
class ErrorViewModel:
    """Context for the shared error page."""

    request_id: Optional[str] = None

    @property
    def show_request_id(self) -> bool:
        return bool(self.request_id)
