"""Duration extraction from free-text task input.

``"Deep work (2 hours)"`` becomes ``ParsedTask("Deep work", 120)``. Patterns
are tried in a fixed order and the first match wins, so a parenthesized
annotation always beats a trailing bare one.
"""
from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedTask:
    title: str
    duration_minutes: int

    @property
    def is_empty(self) -> bool:
        return not self.title


_FLAGS = re.IGNORECASE | re.ASCII

# (pattern, minutes per captured unit)
DURATION_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = (
    (re.compile(r"\((\d+)\s*(?:minutes?|mins?|m)?\)", _FLAGS), 1),
    (re.compile(r"\((\d+)\s*(?:hours?|hrs?|h)\)", _FLAGS), 60),
    (re.compile(r"(\d+)\s*(?:minutes?|mins?|m)$", _FLAGS), 1),
    (re.compile(r"(\d+)\s*(?:hours?|hrs?|h)$", _FLAGS), 60),
)


def parse_task_input(raw_input: str, default_duration: int) -> ParsedTask:
    """Split ``raw_input`` into a title and a duration in minutes.

    Without a recognised annotation the whole trimmed input is the title and
    ``default_duration`` is used. A blank title (input was only an
    annotation) is returned as ``""``; callers decide to discard it.
    """

    text = (raw_input or "").strip()
    for pattern, factor in DURATION_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        title = text.replace(match.group(0), "", 1).strip()
        return ParsedTask(title=title, duration_minutes=int(match.group(1)) * factor)
    return ParsedTask(title=text, duration_minutes=default_duration)


__all__ = ["DURATION_PATTERNS", "ParsedTask", "parse_task_input"]
