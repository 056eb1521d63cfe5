# focusly/services/tasks.py
from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from core.agenda import DaySchedule, TodayAgenda, group_by_day, today_agenda
from core.log import get_logger
from core.parser import parse_task_input
from core.progress import ProgressSummary, summarize
from core.scheduler import find_slot
from helpers.datetime_utils import to_local_naive
from models.settings import PlannerSettings
from models.task import Task, TaskPriority, TaskStatus
from storage.store import PlannerStore


class TaskService:
    _listeners = {
        "after_create": set(),
        "after_update": set(),
        "after_delete": set(),
        "after_reset": set(),
    }

    def __init__(
        self,
        store: Optional[PlannerStore] = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store or PlannerStore()
        self._clock = clock
        self.logger = get_logger("tasks")

    @classmethod
    def subscribe(cls, event: str, callback):
        if event not in cls._listeners:
            raise ValueError(f"Unsupported event: {event}")
        cls._listeners[event].add(callback)

    @classmethod
    def unsubscribe(cls, event: str, callback):
        if event not in cls._listeners:
            return
        cls._listeners[event].discard(callback)

    def _emit(self, event: str, task_id: str | None = None):
        listeners = list(self._listeners.get(event, []))
        for listener in listeners:
            try:
                listener(task_id)
            except Exception:
                self.logger.exception("Listener for %s failed on task %s", event, task_id)

    # ---------- create ----------
    def add_task(
        self,
        raw_input: str,
        is_timed_task: bool = True,
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> Optional[Task]:
        """Parse ``raw_input`` and store a new task.

        Returns ``None`` when nothing is left of the title once the duration
        annotation is stripped. Timed tasks get a slot from the scheduler when
        auto scheduling is on; if none is free the task stays flexible.
        """

        settings = self.store.load_settings()
        parsed = parse_task_input(raw_input, settings.default_task_duration_minutes)
        if parsed.is_empty:
            self.logger.info("Ignoring input without a title: %r", raw_input)
            return None

        duration = parsed.duration_minutes
        if duration <= 0:
            duration = settings.default_task_duration_minutes

        tasks = self.store.load_tasks()
        scheduled = self._auto_slot(tasks, duration, settings) if is_timed_task else None
        now = self._clock()
        task = Task(
            title=parsed.title,
            duration_minutes=duration,
            scheduled_time=scheduled,
            is_timed_task=is_timed_task,
            priority=priority,
            created_at=now,
        )
        tasks.append(task)
        self.store.save_tasks(tasks)

        if is_timed_task and scheduled is None:
            self.logger.info("No free slot for %r (%s min), kept flexible", task.title, duration)
        else:
            self.logger.info("Task created: %s %r at %s", task.id, task.title, scheduled)
        self._emit("after_create", task.id)
        return task

    def _auto_slot(
        self, tasks: List[Task], duration: int, settings: PlannerSettings
    ) -> Optional[datetime]:
        if not settings.auto_scheduling_enabled:
            return None
        return find_slot(tasks, duration, settings, self._clock().date())

    # ---------- read ----------
    def now(self) -> datetime:
        return self._clock()

    def list_tasks(self) -> List[Task]:
        return self.store.load_tasks()

    def get(self, task_id: str) -> Optional[Task]:
        return next((t for t in self.store.load_tasks() if t.id == task_id), None)

    def today(self) -> TodayAgenda:
        return today_agenda(self.store.load_tasks(), self._clock().date())

    def schedule(self) -> List[DaySchedule]:
        return group_by_day(self.store.load_tasks(), self._clock().date())

    def progress(self) -> ProgressSummary:
        return summarize(self.store.load_tasks(), self._clock())

    # ---------- update ----------
    def _mutate(self, task_id: str, change: Callable[[Task, List[Task]], None]) -> Optional[Task]:
        tasks = self.store.load_tasks()
        task = next((t for t in tasks if t.id == task_id), None)
        if task is None:
            return None
        change(task, tasks)
        self.store.save_tasks(tasks)
        self._emit("after_update", task_id)
        return task

    def toggle_complete(self, task_id: str) -> Optional[Task]:
        def change(task: Task, _tasks: List[Task]) -> None:
            task.completed = not task.completed
            task.status = TaskStatus.DONE if task.completed else TaskStatus.NOT_STARTED

        return self._mutate(task_id, change)

    def set_status(self, task_id: str, status: TaskStatus | str) -> Optional[Task]:
        new_status = TaskStatus(status)

        def change(task: Task, _tasks: List[Task]) -> None:
            task.status = new_status
            task.completed = new_status == TaskStatus.DONE

        return self._mutate(task_id, change)

    def reschedule(self, task_id: str) -> Optional[Task]:
        """Look for a new slot today, ignoring the task's own current slot."""

        settings = self.store.load_settings()

        def change(task: Task, tasks: List[Task]) -> None:
            others = [t for t in tasks if t.id != task_id]
            task.scheduled_time = self._auto_slot(others, task.duration_minutes, settings)
            self.logger.info("Task %s rescheduled to %s", task_id, task.scheduled_time)

        return self._mutate(task_id, change)

    def pin(self, task_id: str, start: Optional[datetime]) -> Optional[Task]:
        """Set (or clear, with ``None``) a task's start time by hand."""

        def change(task: Task, _tasks: List[Task]) -> None:
            task.scheduled_time = to_local_naive(start)

        return self._mutate(task_id, change)

    # ---------- delete ----------
    def delete(self, task_id: str) -> bool:
        tasks = self.store.load_tasks()
        remaining = [t for t in tasks if t.id != task_id]
        if len(remaining) == len(tasks):
            return False
        self.store.save_tasks(remaining)
        self.logger.info("Task deleted: %s", task_id)
        self._emit("after_delete", task_id)
        return True

    def reset_all(self) -> None:
        self.store.clear_tasks()
        self.logger.info("All tasks cleared")
        self._emit("after_reset")


__all__ = ["TaskService"]
