"""Employee records, form payloads and validation messages."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

EMPLOYEE_STATUSES: tuple[str, ...] = ("active", "inactive", "on-leave", "terminated")
CONTRACT_TYPES: tuple[str, ...] = ("permanent", "contract", "intern")

STATUS_PATTERN = r"^(active|inactive|on-leave|terminated)$"
CONTRACT_TYPE_PATTERN = r"^(permanent|contract|intern)$"

# Stored documents use the camelCase keys of the browser storage layout.
CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class FieldError(BaseModel):
    """A single rejected field, addressed by its camelCase path."""

    field: str
    message: str


class EmergencyContact(BaseModel):
    name: str = ""
    relationship: str = ""
    phone: str = ""
    email: str | None = None

    model_config = CAMEL_CONFIG


class EmployeeFormData(BaseModel):
    """Payload accepted by create.

    Missing required values default to empty so that every problem is
    reported together by the repository rather than one at a time.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    hire_date: date | None = None
    department_id: str = ""
    role_id: str = ""
    supervisor_id: str | None = None
    status: str = Field(default="active", pattern=STATUS_PATTERN)
    contract_type: str = Field(default="permanent", pattern=CONTRACT_TYPE_PATTERN)
    probation_end_date: date | None = None
    emergency_contact: EmergencyContact = Field(default_factory=EmergencyContact)
    profile_photo: str | None = None

    model_config = CAMEL_CONFIG


class EmployeeUpdate(BaseModel):
    """Partial update; only explicitly set fields are merged."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    hire_date: date | None = None
    department_id: str | None = None
    role_id: str | None = None
    supervisor_id: str | None = None
    status: str | None = Field(default=None, pattern=STATUS_PATTERN)
    contract_type: str | None = Field(default=None, pattern=CONTRACT_TYPE_PATTERN)
    probation_end_date: date | None = None
    emergency_contact: EmergencyContact | None = None
    profile_photo: str | None = None

    model_config = CAMEL_CONFIG


class Employee(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    hire_date: date
    department_id: str
    role_id: str
    supervisor_id: str | None = None
    status: str = Field(..., pattern=STATUS_PATTERN)
    contract_type: str = Field(..., pattern=CONTRACT_TYPE_PATTERN)
    probation_end_date: date | None = None
    emergency_contact: EmergencyContact
    profile_photo: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = CAMEL_CONFIG

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
