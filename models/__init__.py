"""Data models exposed by the Focusly application."""
from .task import Task, TaskPriority, TaskStatus
from .settings import FocusWindow, PlannerSettings

__all__ = ["Task", "TaskPriority", "TaskStatus", "FocusWindow", "PlannerSettings"]
