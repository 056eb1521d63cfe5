"""Completion stats and streaks computed from a task list."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List


@dataclass(frozen=True)
class DayStats:
    completed: int
    total: int

    @property
    def ratio(self) -> float:
        return self.completed / self.total if self.total else 0.0


@dataclass(frozen=True)
class ProgressSummary:
    today: DayStats
    yesterday: DayStats
    this_week: DayStats
    current_streak: int
    total_completed: int
    total_tasks: int

    @property
    def completion_rate(self) -> float:
        """Percentage of all tasks that are completed."""
        return self.total_completed / self.total_tasks * 100 if self.total_tasks else 0.0


def _stats(tasks: List) -> DayStats:
    return DayStats(completed=sum(1 for t in tasks if t.completed), total=len(tasks))


def current_streak(tasks: Iterable, today: date) -> int:
    """Consecutive days with at least one completed scheduled task.

    Counting starts at ``today``, or at yesterday when nothing is done yet
    today; otherwise the streak is zero.
    """

    done_days = Counter(
        t.scheduled_time.date() for t in tasks if t.completed and t.scheduled_time is not None
    )
    if today in done_days:
        cursor = today
    elif today - timedelta(days=1) in done_days:
        cursor = today - timedelta(days=1)
    else:
        return 0

    streak = 0
    while done_days.get(cursor):
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def summarize(tasks: Iterable, now: datetime) -> ProgressSummary:
    items = list(tasks)
    today = now.date()
    yesterday = today - timedelta(days=1)
    week_start = now - timedelta(days=7)
    scheduled = [t for t in items if t.scheduled_time is not None]

    return ProgressSummary(
        today=_stats([t for t in scheduled if t.scheduled_time.date() == today]),
        yesterday=_stats([t for t in scheduled if t.scheduled_time.date() == yesterday]),
        this_week=_stats([t for t in scheduled if t.scheduled_time >= week_start]),
        current_streak=current_streak(items, today),
        total_completed=sum(1 for t in items if t.completed),
        total_tasks=len(items),
    )


__all__ = ["DayStats", "ProgressSummary", "current_streak", "summarize"]
