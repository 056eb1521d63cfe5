"""Shared utilities for clock strings and local calendar days."""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional


def parse_clock(value: str | None) -> Optional[time]:
    """Parse ``HH:MM`` (or ``HH.MM``) into a ``time``; ``None`` when invalid."""

    if not value:
        return None
    text = value.strip()
    if not text:
        return None

    for fmt in ("%H:%M", "%H.%M"):
        try:
            parsed = datetime.strptime(text, fmt)
            return time(parsed.hour, parsed.minute)
        except ValueError:
            continue
    return None


def at_clock(day: date, clock: time) -> datetime:
    """Combine a calendar day and a time of day into a naive local datetime."""

    return datetime.combine(day, clock)


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive local time; naive values pass through."""

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def is_same_day(value: Optional[datetime], day: date) -> bool:
    return value is not None and value.date() == day


def format_clock(value: datetime | time, time_format: str = "12h") -> str:
    """Render a time of day as ``9:30 AM`` (12h) or ``09:30`` (24h)."""

    if time_format == "24h":
        return f"{value.hour:02d}:{value.minute:02d}"
    suffix = "AM" if value.hour < 12 else "PM"
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {suffix}"


def format_day(day: date, today: date) -> str:
    if day == today:
        return "Today"
    if day == today + timedelta(days=1):
        return "Tomorrow"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return f"{day:%A}, {day:%B} {day.day}"


def greeting(now: datetime) -> str:
    if now.hour < 12:
        return "Good morning"
    if now.hour < 17:
        return "Good afternoon"
    return "Good evening"


__all__ = [
    "at_clock",
    "format_clock",
    "format_day",
    "greeting",
    "is_same_day",
    "parse_clock",
    "to_local_naive",
]
