"""JSON and CSV export of employee records."""

from __future__ import annotations

import csv
import io
import logging
from typing import Iterable, Sequence

from pydantic import TypeAdapter, ValidationError

from roster.core.errors import ImportFormatError
from roster.models.employee import Employee
from roster.models.organization import Department, Role
from roster.services.query_engine import resolve_department_name, resolve_role_title

logger = logging.getLogger(__name__)

CSV_HEADERS: list[str] = [
    "ID",
    "First Name",
    "Last Name",
    "Email",
    "Phone",
    "Department",
    "Role",
    "Status",
    "Contract Type",
    "Hire Date",
    "Probation",
    "Probation End Date",
    "Supervisor",
    "Emergency Contact Name",
    "Emergency Contact Relationship",
    "Emergency Contact Phone",
    "Emergency Contact Email",
]

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


def to_json(employees: Iterable[Employee]) -> str:
    return _EMPLOYEE_LIST.dump_json(list(employees), indent=2, by_alias=True).decode("utf-8")


def from_json(text: str | bytes) -> list[Employee]:
    try:
        return _EMPLOYEE_LIST.validate_json(text)
    except ValidationError as e:
        raise ImportFormatError(f"Invalid employee document ({e.error_count()} errors)") from e


def _csv_row(emp: Employee, departments: Sequence[Department], roles: Sequence[Role]) -> list[str]:
    contact = emp.emergency_contact
    return [
        emp.id,
        emp.first_name,
        emp.last_name,
        emp.email,
        emp.phone,
        resolve_department_name(emp.department_id, departments),
        resolve_role_title(emp.role_id, roles),
        emp.status,
        emp.contract_type,
        emp.hire_date.isoformat(),
        "Yes" if emp.probation_end_date else "No",
        emp.probation_end_date.isoformat() if emp.probation_end_date else "",
        emp.supervisor_id or "",
        contact.name,
        contact.relationship,
        contact.phone,
        contact.email or "",
    ]


def to_csv(
    employees: Iterable[Employee],
    departments: Sequence[Department] = (),
    roles: Sequence[Role] = (),
) -> str:
    """Render a bare header line plus one line per employee, every field quoted.

    Embedded double quotes are doubled; dates are ISO-8601.
    """
    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADERS) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    count = 0
    for emp in employees:
        writer.writerow(_csv_row(emp, departments, roles))
        count += 1

    logger.debug("Encoded %d employees as CSV", count)
    return buffer.getvalue()
