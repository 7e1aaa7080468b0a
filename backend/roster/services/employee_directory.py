"""Session facade consumed by presentation code.

Owns one repository, the department/role reference data and the current
list filter. Nothing here is global: callers construct a directory and pass
it to whatever renders the session.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from roster.core.config import Settings
from roster.core.errors import EmployeeValidationError, ImportFormatError
from roster.models.employee import Employee, EmployeeFormData, EmployeeUpdate
from roster.models.organization import Department, Role
from roster.models.query import EmployeeStats, FilterSpec
from roster.services import export_encoder, query_engine
from roster.services.employee_repository import EmployeeRepository
from roster.services.reference_data import seed_departments, seed_employees, seed_roles
from roster.services.storage import EmployeeStorage, JsonFileStore

logger = logging.getLogger(__name__)


class EmployeeDirectory:
    def __init__(
        self,
        repository: EmployeeRepository,
        departments: list[Department] | None = None,
        roles: list[Role] | None = None,
        new_hire_window_days: int = query_engine.NEW_HIRE_WINDOW_DAYS,
    ) -> None:
        self.repository = repository
        self.departments = departments if departments is not None else seed_departments()
        self.roles = roles if roles is not None else seed_roles()
        self.new_hire_window_days = new_hire_window_days
        self.filters = FilterSpec()

    @property
    def employees(self) -> list[Employee]:
        return self.repository.list_all()

    def get_by_id(self, employee_id: str) -> Employee | None:
        return self.repository.get_by_id(employee_id)

    def create(self, data: EmployeeFormData | dict[str, Any]) -> Employee:
        return self.repository.create(data)

    def update(self, employee_id: str, partial: EmployeeUpdate | dict[str, Any]) -> Employee:
        return self.repository.update(employee_id, partial)

    def delete(self, employee_id: str) -> bool:
        return self.repository.delete(employee_id)

    def supervisors(self, exclude_id: str | None = None) -> list[Employee]:
        return [emp for emp in self.repository.list_all() if emp.id != exclude_id]

    def set_filters(self, **changes: Any) -> FilterSpec:
        merged = self.filters.model_dump()
        merged.update(changes)
        self.filters = FilterSpec.model_validate(merged)
        return self.filters

    def clear_filters(self) -> None:
        self.filters = FilterSpec()

    def filtered(self, spec: FilterSpec | None = None) -> list[Employee]:
        return query_engine.filter_employees(
            self.repository.list_all(),
            spec or self.filters,
            self.departments,
            self.roles,
        )

    def statistics(self, now: datetime | date | None = None) -> EmployeeStats:
        return query_engine.compute_statistics(
            self.repository.list_all(),
            self.departments,
            now=now,
            new_hire_window_days=self.new_hire_window_days,
        )

    def export_json(self, filtered: bool = False) -> str:
        records = self.filtered() if filtered else self.repository.list_all()
        return export_encoder.to_json(records)

    def export_csv(self, filtered: bool = False) -> str:
        records = self.filtered() if filtered else self.repository.list_all()
        return export_encoder.to_csv(records, self.departments, self.roles)

    def import_json(self, text: str | bytes) -> bool:
        try:
            self.repository.replace_all(export_encoder.from_json(text))
        except (ImportFormatError, EmployeeValidationError) as e:
            logger.error("Import rejected: %s", e)
            return False
        return True

    def clear_all_data(self) -> None:
        self.repository.replace_all([])

    def reset_to_initial_data(self) -> None:
        self.repository.replace_all(seed_employees())


def open_directory(settings: Settings) -> EmployeeDirectory:
    """Build a directory over the JSON file store named in ``settings``."""
    storage = EmployeeStorage(JsonFileStore(settings.EMPLOYEE_STORE_PATH), key=settings.EMPLOYEE_STORAGE_KEY)
    seed = settings.SEED_INITIAL_DATA and not storage.has_data()

    repository = EmployeeRepository(storage)
    directory = EmployeeDirectory(repository, new_hire_window_days=settings.NEW_HIRE_WINDOW_DAYS)
    if seed:
        logger.info("Employee store %s is empty; seeding demo data", settings.EMPLOYEE_STORE_PATH)
        directory.reset_to_initial_data()
    logger.info("Opened employee directory (%d records)", len(repository))
    return directory
