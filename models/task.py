# focusly/models/task.py
from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional
import time
import uuid

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from helpers.datetime_utils import is_same_day, to_local_naive


class TaskStatus(str, Enum):
    NOT_STARTED = "not-started"
    ACTIVE = "active"
    DONE = "done"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def new_task_id() -> str:
    """Millisecond timestamp plus a random suffix."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


class Task(SQLModel):
    id: str = Field(default_factory=new_task_id)
    title: str
    duration_minutes: int = Field(gt=0)
    scheduled_time: Optional[datetime] = None
    completed: bool = False
    is_timed_task: bool = True
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.NOT_STARTED
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("scheduled_time", "created_at")
    @classmethod
    def local_naive_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        # stored ISO strings may carry "Z" or an offset
        return to_local_naive(value)

    @property
    def is_flexible(self) -> bool:
        return self.scheduled_time is None

    @property
    def end_time(self) -> Optional[datetime]:
        if self.scheduled_time is None:
            return None
        return self.scheduled_time + timedelta(minutes=self.duration_minutes)

    def is_scheduled_on(self, day: date) -> bool:
        return is_same_day(self.scheduled_time, day)


__all__ = ["Task", "TaskPriority", "TaskStatus", "new_task_id"]
