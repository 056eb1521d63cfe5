from __future__ import annotations

from typing import Callable, Optional

import flet as ft

from core.settings import UI
from helpers.datetime_utils import format_clock
from models.task import Task, TaskStatus


def strike_text(text: str, *, strike: bool = False) -> ft.Text:
    return ft.Text(
        text,
        color=UI.theme.done_text if strike else None,
        style=ft.TextStyle(decoration=ft.TextDecoration.LINE_THROUGH if strike else None),
    )


def task_subtitle(task: Task, time_format: str) -> str:
    parts = [f"{task.duration_minutes} min"]
    if task.scheduled_time is not None:
        parts.insert(0, format_clock(task.scheduled_time, time_format))
    elif not task.is_timed_task:
        parts.append("flexible")
    else:
        parts.append("unscheduled")
    return " · ".join(parts)


def task_tile(
    task: Task,
    *,
    time_format: str,
    on_toggle: Callable[[str], None],
    on_status: Callable[[str, TaskStatus], None],
    on_delete: Callable[[str], None],
    on_reschedule: Optional[Callable[[str], None]] = None,
) -> ft.Control:
    menu_items = [
        ft.PopupMenuItem(
            text="Start" if task.status != TaskStatus.ACTIVE else "Pause",
            icon=ft.Icons.PLAY_ARROW if task.status != TaskStatus.ACTIVE else ft.Icons.PAUSE,
            on_click=lambda e, t=task: on_status(
                t.id, TaskStatus.NOT_STARTED if t.status == TaskStatus.ACTIVE else TaskStatus.ACTIVE
            ),
        ),
    ]
    if on_reschedule is not None and task.is_timed_task:
        menu_items.append(
            ft.PopupMenuItem(text="Reschedule", icon=ft.Icons.REPLAY, on_click=lambda e, t=task: on_reschedule(t.id))
        )
    menu_items.append(
        ft.PopupMenuItem(text="Delete", icon=ft.Icons.DELETE_OUTLINE, on_click=lambda e, t=task: on_delete(t.id))
    )

    return ft.Container(
        bgcolor=UI.theme.active_bg if task.status == TaskStatus.ACTIVE else None,
        border_radius=8,
        content=ft.ListTile(
            leading=ft.Checkbox(value=task.completed, on_change=lambda e, t=task: on_toggle(t.id)),
            title=strike_text(task.title, strike=task.completed),
            subtitle=ft.Text(task_subtitle(task, time_format), color=UI.theme.text_subtle),
            trailing=ft.PopupMenuButton(icon=ft.Icons.MORE_HORIZ, items=menu_items),
        ),
    )
