from datetime import date, datetime, timedelta

from core.progress import current_streak, summarize
from models.task import Task

TODAY = date(2024, 3, 11)


def _task(day_offset, completed=True, hour=9):
    day = TODAY + timedelta(days=day_offset)
    return Task(
        title=f"t{day_offset}",
        duration_minutes=30,
        scheduled_time=datetime(day.year, day.month, day.day, hour, 0),
        completed=completed,
    )


def test_no_completed_tasks_no_streak():
    assert current_streak([], TODAY) == 0
    assert current_streak([_task(0, completed=False)], TODAY) == 0


def test_streak_counts_back_from_today():
    tasks = [_task(0), _task(-1), _task(-2), _task(-4)]
    assert current_streak(tasks, TODAY) == 3


def test_streak_can_start_yesterday():
    tasks = [_task(-1), _task(-2), _task(0, completed=False)]
    assert current_streak(tasks, TODAY) == 2


def test_streak_broken_before_yesterday():
    assert current_streak([_task(-2), _task(-3)], TODAY) == 0


def test_flexible_completed_tasks_do_not_count():
    flexible = Task(title="Loose", duration_minutes=10, completed=True)
    assert current_streak([flexible], TODAY) == 0


def test_summary():
    tasks = [
        _task(0),
        _task(0, completed=False, hour=10),
        _task(-1),
        _task(-6, completed=False),
        _task(-10),
        Task(title="Loose", duration_minutes=10),
    ]
    summary = summarize(tasks, datetime(2024, 3, 11, 12, 0))

    assert (summary.today.completed, summary.today.total) == (1, 2)
    assert summary.today.ratio == 0.5
    assert (summary.yesterday.completed, summary.yesterday.total) == (1, 1)
    assert (summary.this_week.completed, summary.this_week.total) == (2, 4)
    assert summary.current_streak == 2
    assert summary.total_completed == 3
    assert summary.total_tasks == 6
    assert summary.completion_rate == 50.0


def test_summary_of_nothing():
    summary = summarize([], datetime(2024, 3, 11, 12, 0))
    assert summary.today.ratio == 0.0
    assert summary.completion_rate == 0.0
