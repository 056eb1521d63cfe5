"""Earliest-fit slot search inside the daily focus window."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

from helpers.datetime_utils import at_clock, parse_clock
from models.settings import PlannerSettings
from models.task import Task


def tasks_on_day(tasks: Iterable[Task], day: date) -> List[Task]:
    """Tasks with a ``scheduled_time`` on ``day``, earliest first."""
    same_day = [t for t in tasks if t.is_scheduled_on(day)]
    return sorted(same_day, key=lambda t: t.scheduled_time)


def scheduled_minutes(tasks: Iterable[Task], day: date) -> int:
    return sum(t.duration_minutes for t in tasks_on_day(tasks, day))


def find_slot(
    existing_tasks: Iterable[Task],
    new_duration_minutes: int,
    settings: PlannerSettings,
    reference_date: date,
) -> Optional[datetime]:
    """Return the earliest start on ``reference_date`` that fits the new task.

    ``None`` means no slot: the daily cap would be exceeded, the window is
    too short or already full, or the settings describe an empty window.
    """

    if new_duration_minutes <= 0 or settings.max_minutes_per_day <= 0:
        return None

    window_start = parse_clock(settings.focus_start)
    window_stop = parse_clock(settings.focus_end)
    if window_start is None or window_stop is None or window_start >= window_stop:
        return None

    day_tasks = tasks_on_day(existing_tasks, reference_date)

    # daily cap is checked once, before looking for a gap
    total = sum(t.duration_minutes for t in day_tasks) + new_duration_minutes
    if total > settings.max_minutes_per_day:
        return None

    needed = timedelta(minutes=new_duration_minutes)
    cursor = at_clock(reference_date, window_start)
    window_end = at_clock(reference_date, window_stop)

    for task in day_tasks:
        if cursor + needed <= task.scheduled_time:
            break
        cursor = max(cursor, task.end_time)

    if cursor + needed <= window_end:
        return cursor
    return None


__all__ = ["find_slot", "scheduled_minutes", "tasks_on_day"]
