# ui/pages/settings.py
import flet as ft

from core.log import read_log_tail
from core.settings import SCHEDULING, UI


class SettingsPage:
    def __init__(self, app):
        self.app = app

        self.nickname_tf = ft.TextField(label="Nickname", width=280)
        self.start_tf = ft.TextField(label="Focus start", hint_text="HH:MM", width=130)
        self.end_tf = ft.TextField(label="Focus end", hint_text="HH:MM", width=130)
        self.max_hours_dd = ft.Dropdown(
            label="Max deep work hours per day",
            width=280,
            options=[ft.dropdown.Option(str(h), f"{h} h") for h in SCHEDULING.max_hours_choices],
        )
        self.duration_dd = ft.Dropdown(
            label="Default task duration",
            width=280,
            options=[ft.dropdown.Option(str(m), f"{m} min") for m in SCHEDULING.duration_choices],
        )
        self.auto_switch = ft.Switch(label="Auto-schedule timed tasks")
        self.time_format_dd = ft.Dropdown(
            label="Time format",
            width=180,
            options=[ft.dropdown.Option("12h", "12 Hour"), ft.dropdown.Option("24h", "24 Hour")],
        )
        self.error_text = ft.Text(color=ft.Colors.RED)
        self.log_view = ft.Text("", selectable=True, size=12)

        self.save_btn = ft.FilledButton("Save", icon=ft.Icons.SAVE, on_click=self.on_save)
        self.reset_btn = ft.OutlinedButton(
            "Reset all data",
            icon=ft.Icons.DELETE_FOREVER,
            on_click=self.confirm_reset,
        )

        self.view = ft.Container(
            expand=True,
            padding=20,
            content=ft.Column(
                [
                    ft.Text("Settings", size=24, weight=ft.FontWeight.BOLD),
                    self.nickname_tf,
                    ft.Text("Focus hours", size=18, weight=ft.FontWeight.W_600),
                    ft.Row([self.start_tf, self.end_tf], spacing=12),
                    self.max_hours_dd,
                    self.duration_dd,
                    self.auto_switch,
                    self.time_format_dd,
                    self.error_text,
                    ft.Row([self.save_btn, self.reset_btn], spacing=12),
                    ft.Text("Activity log", size=18, weight=ft.FontWeight.W_600),
                    ft.Container(self.log_view, height=160, padding=10, bgcolor=UI.theme.surface_bg),
                ],
                spacing=14,
                scroll=ft.ScrollMode.AUTO,
            ),
        )

    def load(self):
        settings = self.app.settings.get()
        self.nickname_tf.value = settings.nickname
        self.start_tf.value = settings.focus_start
        self.end_tf.value = settings.focus_end
        self.max_hours_dd.value = str(settings.max_minutes_per_day // 60)
        self.duration_dd.value = str(settings.default_task_duration_minutes)
        self.auto_switch.value = settings.auto_scheduling_enabled
        self.time_format_dd.value = settings.time_format
        self.error_text.value = ""
        self.log_view.value = read_log_tail()

    def on_save(self, _):
        try:
            self.app.settings.update(
                nickname=(self.nickname_tf.value or "").strip(),
                focus_start=(self.start_tf.value or "").strip(),
                focus_end=(self.end_tf.value or "").strip(),
                max_minutes_per_day=int(self.max_hours_dd.value or 0) * 60,
                default_task_duration_minutes=int(self.duration_dd.value or 0),
                auto_scheduling_enabled=bool(self.auto_switch.value),
                time_format=self.time_format_dd.value or SCHEDULING.time_format,
            )
        except ValueError as exc:
            self.error_text.value = str(exc)
            self.app.page.update()
            return
        self.app.notify("Settings saved")
        self.app.refresh_all()

    def confirm_reset(self, _):
        def on_confirm(e):
            self.app.page.close(dialog)
            self.app.tasks.reset_all()
            self.app.settings.reset()
            self.app.notify("All data cleared")
            self.app.refresh_all()

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Reset all data?"),
            content=ft.Text("This will clear all your tasks and reset settings."),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: self.app.page.close(dialog)),
                ft.FilledButton("Reset", on_click=on_confirm),
            ],
        )
        self.app.page.open(dialog)
