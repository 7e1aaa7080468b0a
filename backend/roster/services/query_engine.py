"""Filtered list views and dashboard statistics over employee records."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Iterable, Sequence

from roster.models.employee import Employee
from roster.models.organization import Department, Role
from roster.models.query import EmployeeStats, FilterSpec

logger = logging.getLogger(__name__)

NEW_HIRE_WINDOW_DAYS = 30


def resolve_department_name(department_id: str, departments: Iterable[Department]) -> str:
    for dept in departments:
        if dept.id == department_id:
            return dept.name
    return ""


def resolve_role_title(role_id: str, roles: Iterable[Role]) -> str:
    for role in roles:
        if role.id == role_id:
            return role.title
    return ""


def search_employees(employees: Iterable[Employee], term: str | None) -> list[Employee]:
    """Case-insensitive substring match on first name, last name, email and id.

    The term is used as given; surrounding whitespace is part of the match.
    """
    if not term:
        return list(employees)

    needle = term.lower()
    return [
        emp
        for emp in employees
        if needle in emp.first_name.lower()
        or needle in emp.last_name.lower()
        or needle in emp.email.lower()
        or needle in emp.id.lower()
    ]


def _sort_key(
    sort_by: str,
    departments: Sequence[Department],
    roles: Sequence[Role],
) -> Callable[[Employee], Any]:
    if sort_by == "name":
        return lambda emp: f"{emp.first_name} {emp.last_name}".lower()
    if sort_by == "hireDate":
        return lambda emp: emp.hire_date
    if sort_by == "department":
        return lambda emp: resolve_department_name(emp.department_id, departments).lower()
    if sort_by == "role":
        return lambda emp: resolve_role_title(emp.role_id, roles).lower()
    raise ValueError(f"Unsupported sort key: {sort_by}")


def filter_employees(
    employees: Iterable[Employee],
    spec: FilterSpec | None = None,
    departments: Sequence[Department] = (),
    roles: Sequence[Role] = (),
) -> list[Employee]:
    """Apply equality filters, search and sort from ``spec``.

    Sorting is stable: records with equal keys keep their input order in
    both directions.
    """
    spec = spec or FilterSpec()
    result = list(employees)

    if spec.department:
        result = [emp for emp in result if emp.department_id == spec.department]
    if spec.role:
        result = [emp for emp in result if emp.role_id == spec.role]
    if spec.status:
        result = [emp for emp in result if emp.status == spec.status]
    if spec.contract_type:
        result = [emp for emp in result if emp.contract_type == spec.contract_type]

    result = search_employees(result, spec.search_term)

    if spec.sort_by:
        key = _sort_key(spec.sort_by, departments, roles)
        result = sorted(result, key=key, reverse=spec.sort_order == "desc")

    return result


def _today(now: datetime | date | None) -> date:
    if now is None:
        return datetime.now(timezone.utc).date()
    if isinstance(now, datetime):
        return now.date()
    return now


def compute_statistics(
    employees: Iterable[Employee],
    departments: Sequence[Department] = (),
    now: datetime | date | None = None,
    new_hire_window_days: int = NEW_HIRE_WINDOW_DAYS,
) -> EmployeeStats:
    records = list(employees)
    today = _today(now)
    window_start = today - timedelta(days=new_hire_window_days)

    # future-dated hires count as new; there is no upper bound
    new_hires = [emp for emp in records if emp.hire_date >= window_start]
    on_probation = [
        emp for emp in records if emp.probation_end_date is not None and emp.probation_end_date > today
    ]

    department_breakdown = Counter(
        resolve_department_name(emp.department_id, departments) or emp.department_id for emp in records
    )

    stats = EmployeeStats(
        total_employees=len(records),
        active_employees=sum(1 for emp in records if emp.status == "active"),
        new_hires=len(new_hires),
        probation_employees=len(on_probation),
        department_breakdown=dict(department_breakdown),
        status_breakdown=dict(Counter(emp.status for emp in records)),
        contract_type_breakdown=dict(Counter(emp.contract_type for emp in records)),
        new_hire_records=new_hires,
        probation_records=on_probation,
    )
    logger.debug(
        "Statistics: total=%d active=%d new_hires=%d probation=%d",
        stats.total_employees,
        stats.active_employees,
        stats.new_hires,
        stats.probation_employees,
    )
    return stats
