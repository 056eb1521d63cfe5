"""Grouping of tasks into the Today list and the per-day schedule."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from core.scheduler import scheduled_minutes
from models.task import Task, TaskStatus


@dataclass
class TodayAgenda:
    tasks: List[Task]

    @property
    def completed(self) -> List[Task]:
        return [t for t in self.tasks if t.completed]

    @property
    def active(self) -> List[Task]:
        return [t for t in self.tasks if t.status == TaskStatus.ACTIVE]

    @property
    def flexible(self) -> List[Task]:
        return [t for t in self.tasks if not t.is_timed_task and not t.completed]

    @property
    def progress(self) -> float:
        return len(self.completed) / len(self.tasks) if self.tasks else 0.0

    @property
    def current_focus(self) -> Optional[Task]:
        active = self.active
        return active[0] if active else None


@dataclass
class DaySchedule:
    day: date
    scheduled: List[Task] = field(default_factory=list)
    flexible: List[Task] = field(default_factory=list)

    @property
    def total_minutes(self) -> int:
        return scheduled_minutes(self.scheduled, self.day)


def _sort_key(task: Task):
    return (task.scheduled_time is None, task.scheduled_time or task.created_at, task.created_at)


def today_agenda(tasks: Iterable[Task], today: date) -> TodayAgenda:
    """Tasks scheduled for ``today`` plus every flexible task."""
    selected = [t for t in tasks if t.scheduled_time is None or t.scheduled_time.date() == today]
    return TodayAgenda(tasks=sorted(selected, key=_sort_key))


def group_by_day(tasks: Iterable[Task], today: date) -> List[DaySchedule]:
    """Group by calendar day, flexible tasks land on ``today``; days ascending."""

    days: Dict[date, DaySchedule] = {}
    for task in sorted(tasks, key=_sort_key):
        day = task.scheduled_time.date() if task.scheduled_time else today
        bucket = days.setdefault(day, DaySchedule(day=day))
        if task.scheduled_time is None:
            bucket.flexible.append(task)
        else:
            bucket.scheduled.append(task)
    return [days[d] for d in sorted(days)]


__all__ = ["DaySchedule", "TodayAgenda", "group_by_day", "today_agenda"]
