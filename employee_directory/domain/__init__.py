"""Domain layer: employee records and their projection."""

from .entities import Employee, EmployeeModel, ErrorViewModel
from .projection import TITLE_NULL_SUBSTITUTE, to_employee_model

__all__ = [
    "Employee",
    "EmployeeModel",
    "ErrorViewModel",
    "TITLE_NULL_SUBSTITUTE",
    "to_employee_model",
]
