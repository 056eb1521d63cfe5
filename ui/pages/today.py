# ui/pages/today.py
import flet as ft

from core.settings import UI
from helpers.datetime_utils import greeting
from models.task import TaskStatus
from ui.widgets import task_tile


class TodayPage:
    LIST_SECTION_HEIGHT = UI.today.list_section_height

    def __init__(self, app):
        self.app = app
        self.svc = app.tasks

        self.greeting_text = ft.Text(size=24, weight=ft.FontWeight.BOLD)
        self.date_text = ft.Text(color=UI.theme.text_subtle)
        self.counter_text = ft.Text(weight=ft.FontWeight.W_600)
        self.progress_bar = ft.ProgressBar(value=0, color=UI.theme.accent)
        self.focus_text = ft.Text(italic=True)

        # ---------- quick add ----------
        self.input_tf = ft.TextField(
            label="What do you want to get done today?",
            hint_text=UI.today.input_hint,
            expand=True,
            autofocus=True,
            prefix_icon=ft.Icons.TASK_ALT,
            on_submit=self.on_add,
        )
        self.timed_cb = ft.Checkbox(label="Make this a timed task", value=UI.today.timed_by_default)
        self.add_btn = ft.FilledButton("Add", icon=ft.Icons.ADD, on_click=self.on_add)

        quick_add = ft.Card(
            content=ft.Container(
                padding=16,
                content=ft.Column(
                    [
                        ft.Row([self.input_tf, self.add_btn], vertical_alignment=ft.CrossAxisAlignment.CENTER),
                        self.timed_cb,
                    ],
                    spacing=8,
                ),
            )
        )

        self.task_list = ft.ListView(expand=True, spacing=6)

        self.view = ft.Container(
            expand=True,
            padding=20,
            content=ft.Column(
                [
                    self.greeting_text,
                    self.date_text,
                    ft.Row([self.progress_bar, self.counter_text], vertical_alignment=ft.CrossAxisAlignment.CENTER),
                    self.focus_text,
                    quick_add,
                    ft.Container(content=self.task_list, height=self.LIST_SECTION_HEIGHT),
                ],
                spacing=12,
                expand=True,
            ),
        )

    def load(self):
        settings = self.app.settings.get()
        agenda = self.svc.today()
        now = self.svc.now()

        name = f", {settings.nickname}" if settings.nickname else ""
        self.greeting_text.value = f"{greeting(now)}{name}"
        self.date_text.value = f"{now:%A}, {now:%B} {now.day}"
        self.counter_text.value = f"{len(agenda.completed)}/{len(agenda.tasks)}" if agenda.tasks else ""
        self.progress_bar.value = agenda.progress
        self.progress_bar.visible = bool(agenda.tasks)
        focus = agenda.current_focus
        self.focus_text.value = f"Now focusing on: {focus.title}" if focus else ""

        self.task_list.controls = [
            task_tile(
                task,
                time_format=settings.time_format,
                on_toggle=self._toggle,
                on_status=self._set_status,
                on_delete=self._delete,
                on_reschedule=self._reschedule,
            )
            for task in agenda.tasks
        ]
        if not agenda.tasks:
            self.task_list.controls = [ft.Text("No tasks yet. Add one above.", color=UI.theme.text_subtle)]

    # ---------- actions ----------
    def on_add(self, _):
        raw = (self.input_tf.value or "").strip()
        if not raw:
            return
        # the shell refreshes every page on task events
        task = self.svc.add_task(raw, is_timed_task=bool(self.timed_cb.value))
        if task is None:
            self.app.notify("Add a title along with the duration")
            return
        self.input_tf.value = ""
        if task.is_timed_task and task.scheduled_time is None:
            self.app.notify("Task added. No free slot today, kept as flexible.")
        else:
            self.app.notify("Task added!")
        self.input_tf.update()

    def _toggle(self, task_id: str):
        self.svc.toggle_complete(task_id)

    def _set_status(self, task_id: str, status: TaskStatus):
        self.svc.set_status(task_id, status)

    def _delete(self, task_id: str):
        self.svc.delete(task_id)
        self.app.notify("Task deleted")

    def _reschedule(self, task_id: str):
        task = self.svc.reschedule(task_id)
        if task is not None and task.scheduled_time is None:
            self.app.notify("No free slot today, task is now flexible")
        else:
            self.app.notify("Task rescheduled")
