"""List filters and dashboard statistics."""

from __future__ import annotations

from pydantic import BaseModel, Field

from roster.models.employee import CAMEL_CONFIG, CONTRACT_TYPE_PATTERN, STATUS_PATTERN, Employee


class FilterSpec(BaseModel):
    """Equality filters, free-text search and sort settings for list views."""

    department: str | None = None
    role: str | None = None
    status: str | None = Field(default=None, pattern=STATUS_PATTERN)
    contract_type: str | None = Field(default=None, pattern=CONTRACT_TYPE_PATTERN)
    search_term: str | None = None
    sort_by: str | None = Field(default=None, pattern=r"^(name|hireDate|department|role)$")
    sort_order: str = Field(default="asc", pattern=r"^(asc|desc)$")

    model_config = CAMEL_CONFIG


class EmployeeStats(BaseModel):
    """Aggregate counts shown on the dashboard."""

    total_employees: int
    active_employees: int
    new_hires: int
    probation_employees: int
    department_breakdown: dict[str, int]
    status_breakdown: dict[str, int]
    contract_type_breakdown: dict[str, int]
    new_hire_records: list[Employee] = []
    probation_records: list[Employee] = []

    model_config = CAMEL_CONFIG
