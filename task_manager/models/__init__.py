"""Models package."""
from .task import Task, TaskStatus, TaskPriority, PRIORITY_ORDER, utcnow, to_utc_naive
from .category import Category, TaskCategoryLink

__all__ = [
    "Task",
    "TaskStatus",
    "TaskPriority",
    "PRIORITY_ORDER",
    "Category",
    "TaskCategoryLink",
    "utcnow",
    "to_utc_naive",
]
