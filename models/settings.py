# focusly/models/settings.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlmodel import Field, SQLModel

from core.settings import SCHEDULING
from helpers.datetime_utils import parse_clock

TIME_FORMATS = ("12h", "24h")


@dataclass(frozen=True)
class FocusWindow:
    start: str
    end: str

    @property
    def width_minutes(self) -> Optional[int]:
        """Window width in minutes, or ``None`` when either bound is unparsable."""
        start, end = parse_clock(self.start), parse_clock(self.end)
        if start is None or end is None:
            return None
        return (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)


class PlannerSettings(SQLModel):
    """User-editable settings persisted under ``focusly-settings``."""

    focus_start: str = SCHEDULING.focus_start
    focus_end: str = SCHEDULING.focus_end
    max_minutes_per_day: int = SCHEDULING.max_minutes_per_day
    default_task_duration_minutes: int = Field(default=SCHEDULING.default_task_duration_minutes, gt=0)
    auto_scheduling_enabled: bool = SCHEDULING.auto_scheduling_enabled
    time_format: str = SCHEDULING.time_format
    nickname: str = ""

    @property
    def focus_window(self) -> FocusWindow:
        return FocusWindow(start=self.focus_start, end=self.focus_end)


def validate_settings(settings: PlannerSettings) -> None:
    """Raise ``ValueError`` describing the first invalid field."""

    if parse_clock(settings.focus_start) is None:
        raise ValueError(f"Invalid focus start time: {settings.focus_start!r}")
    if parse_clock(settings.focus_end) is None:
        raise ValueError(f"Invalid focus end time: {settings.focus_end!r}")
    if (settings.focus_window.width_minutes or 0) <= 0:
        raise ValueError("Focus window must start before it ends")
    if settings.max_minutes_per_day <= 0:
        raise ValueError("Daily limit must be positive")
    if settings.default_task_duration_minutes <= 0:
        raise ValueError("Default duration must be positive")
    if settings.time_format not in TIME_FORMATS:
        raise ValueError(f"Unknown time format: {settings.time_format!r}")


__all__ = ["FocusWindow", "PlannerSettings", "TIME_FORMATS", "validate_settings"]
