"""Exception hierarchy shared by the roster services."""

from __future__ import annotations

from roster.models.employee import FieldError


class RosterError(Exception):
    pass


class EmployeeValidationError(RosterError):
    """Raised before any mutation when an employee payload is rejected."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = errors
        summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
        super().__init__(summary or "Invalid employee data")

    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


class EmployeeNotFoundError(RosterError):
    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee '{employee_id}' not found")


class PersistenceError(RosterError):
    pass


class ImportFormatError(RosterError):
    pass
