# ui/pages/schedule.py
import flet as ft

from core.settings import UI
from helpers.datetime_utils import format_day
from ui.widgets import task_tile


class SchedulePage:
    def __init__(self, app):
        self.app = app
        self.svc = app.tasks
        self.days_list = ft.ListView(expand=True, spacing=16)
        self.view = ft.Container(
            expand=True,
            padding=20,
            content=ft.Column(
                [ft.Text("Schedule", size=24, weight=ft.FontWeight.BOLD), self.days_list],
                spacing=12,
                expand=True,
            ),
        )

    def load(self):
        settings = self.app.settings.get()
        today = self.svc.now().date()
        sections = []
        for day in self.svc.schedule():
            tiles = [
                task_tile(
                    task,
                    time_format=settings.time_format,
                    on_toggle=self._toggle,
                    on_status=self._set_status,
                    on_delete=self._delete,
                    on_reschedule=self._reschedule,
                )
                for task in day.scheduled + day.flexible
            ]
            header = ft.Row(
                [
                    ft.Text(format_day(day.day, today), size=18, weight=ft.FontWeight.W_600),
                    ft.Text(f"{day.total_minutes} min scheduled", color=UI.theme.text_subtle),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            )
            sections.append(ft.Column([header, *tiles], spacing=6))
        if not sections:
            sections = [ft.Text("Nothing planned yet.", color=UI.theme.text_subtle)]
        self.days_list.controls = sections

    def _toggle(self, task_id):
        self.svc.toggle_complete(task_id)

    def _set_status(self, task_id, status):
        self.svc.set_status(task_id, status)

    def _delete(self, task_id):
        self.svc.delete(task_id)
        self.app.notify("Task deleted")

    def _reschedule(self, task_id):
        task = self.svc.reschedule(task_id)
        if task is not None and task.scheduled_time is None:
            self.app.notify("No free slot today, task is now flexible")
        else:
            self.app.notify("Task rescheduled")
