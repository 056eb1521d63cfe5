"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import os
import sys


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``."""

    platform_id = (platform or sys.platform).lower()
    environ = dict(os.environ if env is None else env)
    home_dir = Path(home or Path.home())
    folder = (app_name.strip() or "app").replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = home_dir / "Library" / "Application Support"
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return base.expanduser() / folder


APP_NAME = "Focusly"

DATA_DIR = get_default_data_dir(APP_NAME)
LOG_DIR = DATA_DIR / "logs"

DB_PATH = DATA_DIR / "focusly.db"
LOG_PATH = LOG_DIR / "focusly.log"

TASKS_KEY = "focusly-tasks"
SETTINGS_KEY = "focusly-settings"


def ensure_data_dirs() -> None:
    for folder in (DATA_DIR, LOG_DIR):
        folder.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class SchedulingDefaults:
    focus_start: str = "08:00"
    focus_end: str = "18:00"
    max_minutes_per_day: int = 240
    default_task_duration_minutes: int = 30
    auto_scheduling_enabled: bool = True
    time_format: str = "12h"
    # choices offered by the settings page
    max_hours_choices: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8)
    duration_choices: tuple[int, ...] = (15, 25, 30, 45, 60, 90, 120)


SCHEDULING = SchedulingDefaults()


@dataclass(frozen=True)
class ThemeColors:
    surface_bg: str = "#F9FAFB"
    text_subtle: str = "#6B7280"
    accent: str = "#2563EB"
    active_bg: str = "#DBEAFE"
    done_text: str = "#9CA3AF"
    flexible_bg: str = "#F3E8FF"
    streak: str = "#F97316"


@dataclass(frozen=True)
class TodayUISettings:
    list_section_height: int = 320
    timed_by_default: bool = True
    input_hint: str = "e.g. Finish homework (45)"


@dataclass(frozen=True)
class UISettings:
    app_title: str = APP_NAME
    theme_mode: str = "light"
    color_scheme_seed: str = "#2563EB"
    window_min_width: int = 480
    window_min_height: int = 640
    theme: ThemeColors = ThemeColors()
    today: TodayUISettings = TodayUISettings()


UI = UISettings()


__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "LOG_DIR",
    "DB_PATH",
    "LOG_PATH",
    "TASKS_KEY",
    "SETTINGS_KEY",
    "SCHEDULING",
    "UI",
    "ensure_data_dirs",
    "get_default_data_dir",
]
