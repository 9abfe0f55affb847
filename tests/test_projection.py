"""
Unit tests for employee projection.

Tests for to_employee_model field copying, title substitution,
address rename and registration date exclusion.
"""

from datetime import date

import pytest

from employee_directory.domain.entities import Employee, EmployeeModel
from employee_directory.domain.projection import (
    TITLE_NULL_SUBSTITUTE,
    to_employee_model,
)


class TestToEmployeeModel:
    """Tests for the Employee to EmployeeModel projection."""

    def test_simon_scenario(self, simon):
        """Fully populated record keeps title and drops date."""
        assert to_employee_model(simon) == EmployeeModel(
            id=1,
            title="Mr",
            name="Simon",
            age=32,
            registration_date=None,
            work_address=None,
        )

    def test_david_scenario(self, david):
        """Missing title becomes N/A and office address is renamed."""
        assert to_employee_model(david) == EmployeeModel(
            id=2,
            title="N/A",
            name="David",
            age=35,
            registration_date=None,
            work_address="123 ABC Street",
        )

    def test_peter_scenario(self, peter):
        """Missing date and address stay absent."""
        assert to_employee_model(peter) == EmployeeModel(
            id=3,
            title="Mr",
            name="Peter",
            age=29,
            registration_date=None,
            work_address=None,
        )

    @pytest.mark.parametrize("title", ["Mr", "Mrs", "Dr", "Prof"])
    def test_present_title_is_copied(self, title):
        employee = Employee(id=10, title=title, name="Alex")
        assert to_employee_model(employee).title == title

    def test_empty_title_is_kept(self):
        """Only a missing title is substituted."""
        employee = Employee(id=11, title="", name="Alex")
        assert to_employee_model(employee).title == ""

    def test_missing_title_uses_substitute(self):
        employee = Employee(id=12, title=None, name="Alex")
        assert to_employee_model(employee).title == TITLE_NULL_SUBSTITUTE == "N/A"

    @pytest.mark.parametrize(
        "registration_date", [None, date(2000, 1, 1), date(2024, 2, 29)]
    )
    def test_registration_date_never_projected(self, registration_date):
        employee = Employee(
            id=13, title="Ms", name="Jo", registration_date=registration_date
        )
        assert to_employee_model(employee).registration_date is None

    @pytest.mark.parametrize("address", [None, "1 Main Road", ""])
    def test_office_address_becomes_work_address(self, address):
        employee = Employee(id=14, title="Ms", name="Jo", office_address=address)
        assert to_employee_model(employee).work_address == address

    def test_missing_age_propagates(self):
        employee = Employee(id=15, title="Ms", name="Jo", age=None)
        assert to_employee_model(employee).age is None

    def test_id_and_name_copied(self, employees):
        for employee in employees:
            model = to_employee_model(employee)
            assert model.id == employee.id
            assert model.name == employee.name

    def test_sparse_record_projects(self):
        """A record with only required fields projects without error."""
        model = to_employee_model(Employee(id=99, title=None, name="Sparse"))
        assert model == EmployeeModel(id=99, title="N/A", name="Sparse")

    def test_projection_is_deterministic(self, david):
        assert to_employee_model(david) == to_employee_model(david)
