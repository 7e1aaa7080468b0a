from __future__ import annotations

import itertools
from datetime import date, datetime, timezone

import pytest

from roster.models.employee import EmergencyContact, Employee
from roster.services.employee_directory import EmployeeDirectory
from roster.services.employee_repository import EmployeeRepository
from roster.services.reference_data import seed_departments, seed_roles
from roster.services.storage import EmployeeStorage, InMemoryStore

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start: datetime = FIXED_NOW) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now


def _counter_ids():
    counter = itertools.count(1)
    return lambda: f"emp_test_{next(counter)}"


def make_form(**overrides) -> dict:
    data = {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "phone": "+1-555-0101",
        "hireDate": "2023-01-01",
        "departmentId": "dept_eng",
        "roleId": "role_swe",
        "status": "active",
        "contractType": "permanent",
        "emergencyContact": {
            "name": "Jane Doe",
            "relationship": "Spouse",
            "phone": "+1-555-0102",
        },
    }
    data.update(overrides)
    return data


def make_employee(emp_id: str, **overrides) -> Employee:
    fields = {
        "id": emp_id,
        "first_name": "Test",
        "last_name": "Person",
        "email": f"{emp_id}@example.com",
        "phone": "+1-555-0000",
        "hire_date": date(2023, 1, 1),
        "department_id": "dept_eng",
        "role_id": "role_swe",
        "status": "active",
        "contract_type": "permanent",
        "emergency_contact": EmergencyContact(name="Contact", relationship="Friend", phone="+1-555-9999"),
        "created_at": FIXED_NOW,
        "updated_at": FIXED_NOW,
    }
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def storage(store):
    return EmployeeStorage(store)


@pytest.fixture
def repository(storage, clock):
    return EmployeeRepository(storage, id_factory=_counter_ids(), clock=clock)


@pytest.fixture
def departments():
    return seed_departments()


@pytest.fixture
def roles():
    return seed_roles()


@pytest.fixture
def directory(repository, departments, roles):
    return EmployeeDirectory(repository, departments, roles)
