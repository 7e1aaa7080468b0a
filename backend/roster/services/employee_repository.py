"""In-memory employee repository with write-through persistence."""

from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from roster.core.errors import EmployeeNotFoundError, EmployeeValidationError
from roster.models.employee import Employee, EmployeeFormData, EmployeeUpdate, FieldError
from roster.services.storage import EmployeeStorage

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_REQUIRED_TEXT: list[tuple[str, str, str]] = [
    ("first_name", "firstName", "First name is required"),
    ("last_name", "lastName", "Last name is required"),
    ("phone", "phone", "Phone number is required"),
    ("department_id", "departmentId", "Department is required"),
    ("role_id", "roleId", "Role is required"),
]

_REQUIRED_CONTACT: list[tuple[str, str, str]] = [
    ("name", "emergencyContact.name", "Emergency contact name is required"),
    ("relationship", "emergencyContact.relationship", "Emergency contact relationship is required"),
    ("phone", "emergencyContact.phone", "Emergency contact phone is required"),
]

ModelT = TypeVar("ModelT", bound=BaseModel)


def generate_employee_id() -> str:
    return f"emp_{uuid.uuid4().hex[:12]}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _error_path(loc: tuple) -> str:
    return ".".join(to_camel(part) if isinstance(part, str) else str(part) for part in loc) or "payload"


def _record_errors(record: EmployeeFormData | Employee, employee_id: str | None) -> list[FieldError]:
    """Checks that relate fields of a single record to each other."""
    errors: list[FieldError] = []
    if (
        record.hire_date is not None
        and record.probation_end_date is not None
        and record.probation_end_date <= record.hire_date
    ):
        errors.append(FieldError(field="probationEndDate", message="Probation end date must be after hire date"))
    if employee_id is not None and record.supervisor_id == employee_id:
        errors.append(FieldError(field="supervisorId", message="An employee cannot supervise themselves"))
    return errors


def _coerce(model: type[ModelT], data: Any) -> ModelT:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [FieldError(field=_error_path(err["loc"]), message=err["msg"]) for err in e.errors()]
        raise EmployeeValidationError(errors) from e


class EmployeeRepository:
    """Source of truth for employee records during a session.

    Every successful mutation is written through to ``storage``. A failed
    write is logged by the storage adapter and the in-memory state is kept.
    """

    def __init__(
        self,
        storage: EmployeeStorage | None = None,
        *,
        id_factory: Callable[[], str] = generate_employee_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.storage = storage
        self.id_factory = id_factory
        self.clock = clock
        self._employees: list[Employee] = storage.load() if storage else []

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return any(emp.id == employee_id for emp in self._employees)

    def list_all(self) -> list[Employee]:
        return list(self._employees)

    def get_by_id(self, employee_id: str) -> Employee | None:
        for emp in self._employees:
            if emp.id == employee_id:
                return emp
        return None

    def create(self, data: EmployeeFormData | dict[str, Any]) -> Employee:
        form = _coerce(EmployeeFormData, data)

        errors = self._collect_errors(form, employee_id=None, check_supervisor=True)
        if errors:
            raise EmployeeValidationError(errors)

        employee_id = self.id_factory()
        while employee_id in self:
            logger.warning("Generated id %s already in use; regenerating", employee_id)
            employee_id = self.id_factory()

        now = self.clock()
        employee = Employee(
            id=employee_id,
            created_at=now,
            updated_at=now,
            **form.model_dump(exclude={"email"}),
            email=form.email.strip(),
        )

        self._commit([*self._employees, employee])
        logger.info("Created employee %s (%s)", employee.id, employee.full_name)
        return employee

    def update(self, employee_id: str, partial: EmployeeUpdate | dict[str, Any]) -> Employee:
        index = self._index_of(employee_id)
        if index is None:
            raise EmployeeNotFoundError(employee_id)

        changes = _coerce(EmployeeUpdate, partial).model_dump(exclude_unset=True)
        current = self._employees[index]

        merged = current.model_dump()
        merged.update(changes)
        if isinstance(merged.get("email"), str):
            merged["email"] = merged["email"].strip()
        merged["updated_at"] = self.clock()
        updated = _coerce(Employee, merged)

        errors = self._collect_errors(
            updated,
            employee_id=employee_id,
            check_supervisor="supervisor_id" in changes,
        )
        if errors:
            raise EmployeeValidationError(errors)

        employees = list(self._employees)
        employees[index] = updated
        self._commit(employees)
        logger.info("Updated employee %s (fields: %s)", employee_id, ", ".join(sorted(changes)) or "none")
        return updated

    def delete(self, employee_id: str) -> bool:
        index = self._index_of(employee_id)
        if index is None:
            logger.debug("Delete requested for unknown employee %s", employee_id)
            return False

        employees = list(self._employees)
        del employees[index]
        self._commit(employees)
        logger.info("Deleted employee %s", employee_id)
        return True

    def replace_all(self, employees: Iterable[Employee]) -> None:
        """Swap the whole record set.

        Rejects duplicate ids or emails, and records whose own fields
        contradict each other (probation ending on or before the hire date,
        self-supervision).
        """
        incoming = list(employees)

        errors: list[FieldError] = []
        seen_ids: set[str] = set()
        seen_emails: set[str] = set()
        for emp in incoming:
            if emp.id in seen_ids:
                errors.append(FieldError(field="id", message=f"Duplicate employee id '{emp.id}'"))
            seen_ids.add(emp.id)
            email = emp.email.strip().lower()
            if email in seen_emails:
                errors.append(FieldError(field="email", message=f"Duplicate email '{emp.email}'"))
            seen_emails.add(email)
            errors.extend(_record_errors(emp, emp.id))
        if errors:
            raise EmployeeValidationError(errors)

        self._commit(incoming)
        logger.info("Replaced employee set (%d records)", len(incoming))

    def _commit(self, employees: list[Employee]) -> None:
        self._employees = employees
        if self.storage is not None:
            self.storage.save(employees)

    def _index_of(self, employee_id: str) -> int | None:
        for index, emp in enumerate(self._employees):
            if emp.id == employee_id:
                return index
        return None

    def _email_taken(self, email: str, exclude_id: str | None) -> bool:
        needle = email.strip().lower()
        return any(emp.email.strip().lower() == needle and emp.id != exclude_id for emp in self._employees)

    def _collect_errors(
        self,
        record: EmployeeFormData | Employee,
        *,
        employee_id: str | None,
        check_supervisor: bool,
    ) -> list[FieldError]:
        errors: list[FieldError] = []

        for attr, field, message in _REQUIRED_TEXT:
            if not getattr(record, attr).strip():
                errors.append(FieldError(field=field, message=message))

        email = record.email.strip()
        if not email:
            errors.append(FieldError(field="email", message="Email is required"))
        elif not EMAIL_PATTERN.match(email):
            errors.append(FieldError(field="email", message="Invalid email format"))
        elif self._email_taken(email, exclude_id=employee_id):
            errors.append(FieldError(field="email", message="Email already exists"))

        if record.hire_date is None:
            errors.append(FieldError(field="hireDate", message="Hire date is required"))

        contact = record.emergency_contact
        for attr, field, message in _REQUIRED_CONTACT:
            if not getattr(contact, attr).strip():
                errors.append(FieldError(field=field, message=message))

        errors.extend(_record_errors(record, employee_id))

        supervisor_id = record.supervisor_id
        if check_supervisor and supervisor_id and supervisor_id != employee_id and supervisor_id not in self:
            errors.append(FieldError(field="supervisorId", message="Supervisor does not exist"))

        return errors
