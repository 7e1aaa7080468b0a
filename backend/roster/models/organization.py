"""Department and role reference data."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from roster.models.employee import CAMEL_CONFIG


class Department(BaseModel):
    id: str
    name: str
    description: str | None = None
    parent_department_id: str | None = None
    manager_id: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = CAMEL_CONFIG


class Role(BaseModel):
    id: str
    title: str
    description: str | None = None
    level: int
    department_id: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = CAMEL_CONFIG
