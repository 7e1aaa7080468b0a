"""Key-value stores and the employee persistence adapter.

The adapter keeps the whole employee list as one JSON document under a single
key. Store failures never reach the caller: the in-memory repository remains
the source of truth for the rest of the session.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from roster.core.errors import PersistenceError
from roster.models.employee import Employee

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "employee_management_data"

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore:
    """A single JSON object on disk mapping keys to string values."""

    def __init__(self, path: str) -> None:
        self.path = path

    def _read_all(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Cannot read store {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"Store {self.path} does not contain a JSON object")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".roster-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise PersistenceError(f"Cannot write store {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)


class EmployeeStorage:
    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    def has_data(self) -> bool:
        try:
            return self.store.get(self.key) is not None
        except Exception:
            logger.exception("Failed to read employee storage key %s", self.key)
            return False

    def load(self) -> list[Employee]:
        try:
            raw = self.store.get(self.key)
        except Exception:
            logger.exception("Failed to read employee storage key %s", self.key)
            return []

        if raw is None:
            return []

        try:
            return _EMPLOYEE_LIST.validate_json(raw)
        except ValidationError as e:
            logger.error("Stored employee data is invalid (%d errors); starting empty", e.error_count())
            return []

    def save(self, employees: list[Employee]) -> bool:
        try:
            payload = _EMPLOYEE_LIST.dump_json(employees, by_alias=True).decode("utf-8")
            self.store.set(self.key, payload)
        except Exception:
            logger.exception("Failed to save %d employees; continuing in memory", len(employees))
            return False
        logger.debug("Saved %d employees under %s", len(employees), self.key)
        return True
