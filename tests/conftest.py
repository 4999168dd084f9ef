"""
Test configuration and fixtures
"""

import pytest

from workforce.business_logic.employee_manager import EmployeeManager
from workforce.business_logic.entities import EmployeeEntity, InternEntity, ManagerEntity
from workforce.business_logic.person_registry import PersonRegistry
from workforce.presentation.console_narrator import RecordingNarrator


@pytest.fixture
def narrator():
    """Narrator that keeps lines in memory"""
    return RecordingNarrator()


@pytest.fixture
def registry(narrator):
    """Fresh registry with a zero population for each test"""
    return PersonRegistry(narrator)


@pytest.fixture
def employee_manager(narrator):
    return EmployeeManager(narrator)


@pytest.fixture
def employee(registry):
    return EmployeeEntity("Bob", 28, 1001, 7000.0, registry=registry)


@pytest.fixture
def manager(registry):
    return ManagerEntity("Carol", 35, 2001, 15000.0, 5, registry=registry)


@pytest.fixture
def intern(registry):
    return InternEntity("Eve", 22, 4001, 1000.0, registry=registry)
