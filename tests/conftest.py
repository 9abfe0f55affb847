"""
Employee Directory Tests - Test Configuration.

Provides pytest fixtures for domain records, settings and application
instances used across the test suite.
"""

from datetime import date
from typing import List

import pytest

from employee_directory.app import create_app
from employee_directory.config import Settings
from employee_directory.domain.entities import Employee


@pytest.fixture
def simon() -> Employee:
    """Fully populated employee without an office address."""
    return Employee(
        id=1,
        title="Mr",
        name="Simon",
        age=32,
        registration_date=date(2015, 12, 5),
        office_address=None,
    )


@pytest.fixture
def david() -> Employee:
    """Employee without a title."""
    return Employee(
        id=2,
        title=None,
        name="David",
        age=35,
        registration_date=date(2013, 3, 15),
        office_address="123 ABC Street",
    )


@pytest.fixture
def peter() -> Employee:
    """Employee without registration date or office address."""
    return Employee(
        id=3,
        title="Mr",
        name="Peter",
        age=29,
        registration_date=None,
        office_address=None,
    )


@pytest.fixture
def employees(simon: Employee, david: Employee, peter: Employee) -> List[Employee]:
    """The three demonstration employees in source order."""
    return [simon, david, peter]


@pytest.fixture
def development_settings() -> Settings:
    """Settings for a local development run."""
    return Settings(ENVIRONMENT="development", LOG_LEVEL="DEBUG")


@pytest.fixture
def production_settings() -> Settings:
    """Settings for a deployed run with HSTS and the error page handler."""
    return Settings(ENVIRONMENT="production", HSTS_MAX_AGE=2592000)


@pytest.fixture
def development_app(development_settings: Settings):
    """Application built in development mode."""
    return create_app(development_settings)


@pytest.fixture
def production_app(production_settings: Settings):
    """Application built in production mode."""
    return create_app(production_settings)
