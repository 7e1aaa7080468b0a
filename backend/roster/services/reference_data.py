"""Seed departments, roles and demo employees."""

from __future__ import annotations

from datetime import date, datetime, timezone

from roster.models.employee import EmergencyContact, Employee
from roster.models.organization import Department, Role

SEED_TIMESTAMP = datetime(2023, 1, 1, tzinfo=timezone.utc)


def _department(dept_id: str, name: str, description: str, manager_id: str | None = None) -> Department:
    return Department(
        id=dept_id,
        name=name,
        description=description,
        manager_id=manager_id,
        created_at=SEED_TIMESTAMP,
        updated_at=SEED_TIMESTAMP,
    )


def _role(role_id: str, title: str, level: int, department_id: str) -> Role:
    return Role(
        id=role_id,
        title=title,
        level=level,
        department_id=department_id,
        created_at=SEED_TIMESTAMP,
        updated_at=SEED_TIMESTAMP,
    )


def seed_departments() -> list[Department]:
    return [
        _department("dept_eng", "Engineering", "Product and platform development", "emp_1"),
        _department("dept_hr", "Human Resources", "People operations and recruiting", "emp_2"),
        _department("dept_mkt", "Marketing", "Brand, content and campaigns"),
        _department("dept_sales", "Sales", "Customer acquisition and accounts"),
        _department("dept_fin", "Finance", "Accounting, payroll and planning"),
    ]


def seed_roles() -> list[Role]:
    return [
        _role("role_swe", "Software Engineer", 2, "dept_eng"),
        _role("role_senior_swe", "Senior Software Engineer", 3, "dept_eng"),
        _role("role_eng_manager", "Engineering Manager", 4, "dept_eng"),
        _role("role_hr_manager", "HR Manager", 4, "dept_hr"),
        _role("role_hr_specialist", "HR Specialist", 2, "dept_hr"),
        _role("role_marketing_specialist", "Marketing Specialist", 2, "dept_mkt"),
        _role("role_sales_rep", "Sales Representative", 1, "dept_sales"),
        _role("role_financial_analyst", "Financial Analyst", 2, "dept_fin"),
    ]


def _employee(
    emp_id: str,
    first_name: str,
    last_name: str,
    phone: str,
    department_id: str,
    role_id: str,
    status: str,
    contract_type: str,
    hire_date: date,
    contact: EmergencyContact,
    supervisor_id: str | None = None,
    probation_end_date: date | None = None,
) -> Employee:
    return Employee(
        id=emp_id,
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}.{last_name.lower()}@company.com",
        phone=phone,
        hire_date=hire_date,
        department_id=department_id,
        role_id=role_id,
        supervisor_id=supervisor_id,
        status=status,
        contract_type=contract_type,
        probation_end_date=probation_end_date,
        emergency_contact=contact,
        created_at=SEED_TIMESTAMP,
        updated_at=SEED_TIMESTAMP,
    )


def seed_employees() -> list[Employee]:
    """Demo employees used to initialise an empty store or reset one."""
    return [
        _employee(
            "emp_1", "John", "Doe", "+1-555-0101", "dept_eng", "role_senior_swe",
            "active", "permanent", date(2023, 3, 15),
            EmergencyContact(name="Jane Doe", relationship="Spouse", phone="+1-555-0102", email="jane.doe@email.com"),
        ),
        _employee(
            "emp_2", "Sarah", "Johnson", "+1-555-0201", "dept_hr", "role_hr_manager",
            "active", "permanent", date(2023, 6, 1),
            EmergencyContact(
                name="Mike Johnson", relationship="Husband", phone="+1-555-0202", email="mike.johnson@email.com"
            ),
        ),
        _employee(
            "emp_3", "Michael", "Chen", "+1-555-0301", "dept_eng", "role_swe",
            "active", "permanent", date(2024, 1, 15),
            EmergencyContact(name="Lisa Chen", relationship="Sister", phone="+1-555-0302", email="lisa.chen@email.com"),
            supervisor_id="emp_1",
            probation_end_date=date(2024, 7, 15),
        ),
        _employee(
            "emp_4", "Emily", "Rodriguez", "+1-555-0401", "dept_mkt", "role_marketing_specialist",
            "active", "contract", date(2023, 9, 20),
            EmergencyContact(
                name="Carlos Rodriguez", relationship="Father", phone="+1-555-0402", email="carlos.rodriguez@email.com"
            ),
        ),
        _employee(
            "emp_5", "David", "Wilson", "+1-555-0501", "dept_sales", "role_sales_rep",
            "active", "intern", date(2024, 11, 1),
            EmergencyContact(
                name="Mary Wilson", relationship="Mother", phone="+1-555-0502", email="mary.wilson@email.com"
            ),
            supervisor_id="emp_6",
            probation_end_date=date(2025, 5, 1),
        ),
        _employee(
            "emp_6", "Jessica", "Brown", "+1-555-0601", "dept_fin", "role_financial_analyst",
            "on-leave", "permanent", date(2022, 8, 10),
            EmergencyContact(
                name="Robert Brown", relationship="Spouse", phone="+1-555-0602", email="robert.brown@email.com"
            ),
        ),
    ]
