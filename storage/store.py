"""Durable key-value store for the task list and the user settings."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Tuple

from pydantic import ValidationError
from sqlmodel import Session

from core.log import get_logger
from core.settings import SETTINGS_KEY, TASKS_KEY
from models.settings import PlannerSettings
from models.store_entry import StoreEntry
from models.task import Task
from storage.db import get_session

logger = get_logger("store")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _serialise(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def _deserialise(key: str, payload: Optional[str]) -> Any:
    if not payload:
        return None
    try:
        return json.loads(payload)
    except json.JSONDecodeError:
        logger.warning("Stored value for %s is not valid JSON, ignoring it", key)
        return None


class PlannerStore:
    """Load/save interface over the ``kv_store`` table.

    Tasks live under ``focusly-tasks`` as a JSON array, settings under
    ``focusly-settings`` as a JSON object. Unreadable values load as empty
    defaults instead of failing.
    """

    def __init__(self, session_factory: Callable[[], Session] = get_session):
        self._session_factory = session_factory

    # ----- raw keys -----
    def get_raw(self, key: str) -> Optional[str]:
        with self._session_factory() as session:
            row = session.get(StoreEntry, key)
            return row.value if row else None

    def set_raw(self, key: str, value: str) -> None:
        with self._session_factory() as session:
            row = session.get(StoreEntry, key)
            if row is None:
                row = StoreEntry(key=key, value=value)
            else:
                row.value = value
                row.updated_at = _utcnow()
            session.add(row)
            session.commit()

    def delete(self, key: str) -> None:
        with self._session_factory() as session:
            row = session.get(StoreEntry, key)
            if row is not None:
                session.delete(row)
                session.commit()

    # ----- tasks -----
    def _read_task_items(self) -> Tuple[List[Task], List[Any]]:
        """Split the stored array into valid tasks and items that fail validation."""

        data = _deserialise(TASKS_KEY, self.get_raw(TASKS_KEY))
        if data is None:
            return [], []
        if not isinstance(data, list):
            logger.warning("Stored task list is not an array, ignoring it")
            return [], []
        tasks: List[Task] = []
        unreadable: List[Any] = []
        for item in data:
            try:
                tasks.append(Task.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping unreadable task %r: %s", item, exc)
                unreadable.append(item)
        return tasks, unreadable

    def load_tasks(self) -> List[Task]:
        return self._read_task_items()[0]

    def save_tasks(self, tasks: List[Task]) -> None:
        # items we could not read are written back untouched, never dropped
        _, unreadable = self._read_task_items()
        payload = [t.model_dump(mode="json") for t in tasks] + unreadable
        self.set_raw(TASKS_KEY, _serialise(payload))

    def clear_tasks(self) -> None:
        self.delete(TASKS_KEY)

    # ----- settings -----
    def load_settings(self) -> PlannerSettings:
        data = _deserialise(SETTINGS_KEY, self.get_raw(SETTINGS_KEY))
        if not isinstance(data, dict):
            return PlannerSettings()
        try:
            return PlannerSettings.model_validate(data)
        except ValidationError as exc:
            logger.warning("Stored settings are invalid, using defaults: %s", exc)
            return PlannerSettings()

    def save_settings(self, settings: PlannerSettings) -> None:
        self.set_raw(SETTINGS_KEY, _serialise(settings.model_dump(mode="json")))


__all__ = ["PlannerStore"]
