# ui/app_shell.py
from __future__ import annotations

import flet as ft

from core.settings import UI
from services.settings import SettingsService
from services.tasks import TaskService
from storage.store import PlannerStore

from .pages.today import TodayPage
from .pages.schedule import SchedulePage
from .pages.progress import ProgressPage
from .pages.settings import SettingsPage


class AppShell:
    def __init__(self, page: ft.Page, store: PlannerStore | None = None):
        self.page = page
        self.page.title = UI.app_title
        self.page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
        self.page.vertical_alignment = ft.MainAxisAlignment.START

        store = store or PlannerStore()
        self.tasks = TaskService(store)
        self.settings = SettingsService(store)

        self._today = TodayPage(self)
        self._schedule = SchedulePage(self)
        self._progress = ProgressPage(self)
        self._settings = SettingsPage(self)
        self._pages = [self._today, self._schedule, self._progress, self._settings]

        for event in ("after_create", "after_update", "after_delete", "after_reset"):
            TaskService.subscribe(event, self._on_task_event)

        self.content = ft.Container(expand=True, bgcolor=UI.theme.surface_bg)

        self.nav = ft.NavigationBar(
            selected_index=0,
            on_change=self.on_nav_change,
            destinations=[
                ft.NavigationBarDestination(icon=ft.Icons.HOME_OUTLINED, selected_icon=ft.Icons.HOME, label="Today"),
                ft.NavigationBarDestination(
                    icon=ft.Icons.CALENDAR_MONTH_OUTLINED, selected_icon=ft.Icons.CALENDAR_MONTH, label="Schedule"
                ),
                ft.NavigationBarDestination(
                    icon=ft.Icons.LOCAL_FIRE_DEPARTMENT_OUTLINED,
                    selected_icon=ft.Icons.LOCAL_FIRE_DEPARTMENT,
                    label="Progress",
                ),
                ft.NavigationBarDestination(icon=ft.Icons.SETTINGS_OUTLINED, selected_icon=ft.Icons.SETTINGS, label="Settings"),
            ],
        )

    # ---------- mount ----------
    def mount(self):
        self.page.controls.clear()
        self.page.navigation_bar = self.nav
        self.page.add(self.content)
        self._show(0)

    def on_nav_change(self, e: ft.ControlEvent):
        self._show(int(e.control.selected_index))

    def _show(self, index: int):
        page = self._pages[index]
        page.load()
        self.content.content = page.view
        self.page.update()

    # ---------- helpers for pages ----------
    def notify(self, message: str):
        self.page.open(ft.SnackBar(ft.Text(message), duration=3000))

    def _on_task_event(self, _task_id):
        self.refresh_all()

    def refresh_all(self):
        for page in self._pages:
            page.load()
        self.page.update()
