"""
Projection of employee domain records into view records.

Three fields get special treatment:

- ``title`` falls back to ``TITLE_NULL_SUBSTITUTE`` when missing
- ``office_address`` is exposed as ``work_address``
- ``registration_date`` is withheld from the view
"""

from .entities import Employee, EmployeeModel

TITLE_NULL_SUBSTITUTE = "N/A"


def to_employee_model(employee: Employee) -> EmployeeModel:
    """
    Project an employee record into its view record.

    Args:
        employee: Domain record to project

    Returns:
        View record for the presentation layer
    """
    return EmployeeModel(
        id=employee.id,
        title=employee.title if employee.title is not None else TITLE_NULL_SUBSTITUTE,
        name=employee.name,
        age=employee.age,
        registration_date=None,
        work_address=employee.office_address,
    )
