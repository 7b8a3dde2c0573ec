"""Services composing validation and storage."""
from .category_service import CategoryService
from .task_service import TaskService

__all__ = ["CategoryService", "TaskService"]
