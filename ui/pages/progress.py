# ui/pages/progress.py
import flet as ft

from core.settings import UI


def _stat_card(label: str) -> tuple[ft.Card, ft.Text]:
    value = ft.Text(size=22, weight=ft.FontWeight.BOLD)
    card = ft.Card(
        content=ft.Container(
            padding=14,
            content=ft.Column([ft.Text(label, color=UI.theme.text_subtle), value], spacing=4),
        )
    )
    return card, value


class ProgressPage:
    def __init__(self, app):
        self.app = app
        self.streak_text = ft.Text(size=40, weight=ft.FontWeight.BOLD, color=UI.theme.streak)
        today_card, self.today_value = _stat_card("Today")
        yesterday_card, self.yesterday_value = _stat_card("Yesterday")
        week_card, self.week_value = _stat_card("Last 7 days")
        rate_card, self.rate_value = _stat_card("Completion rate")

        self.view = ft.Container(
            expand=True,
            padding=20,
            content=ft.Column(
                [
                    ft.Text("Progress", size=24, weight=ft.FontWeight.BOLD),
                    ft.Row([ft.Icon(ft.Icons.LOCAL_FIRE_DEPARTMENT, color=UI.theme.streak), self.streak_text]),
                    ft.Row([today_card, yesterday_card], wrap=True),
                    ft.Row([week_card, rate_card], wrap=True),
                ],
                spacing=12,
            ),
        )

    def load(self):
        summary = self.app.tasks.progress()
        days = "day" if summary.current_streak == 1 else "days"
        self.streak_text.value = f"{summary.current_streak} {days} streak"
        self.today_value.value = f"{summary.today.completed}/{summary.today.total}"
        self.yesterday_value.value = f"{summary.yesterday.completed}/{summary.yesterday.total}"
        self.week_value.value = f"{summary.this_week.completed}/{summary.this_week.total}"
        self.rate_value.value = f"{summary.completion_rate:.0f}%"
