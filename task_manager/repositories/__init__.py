"""Storage layer for tasks, categories and their associations."""
from .category_repo import CategoryRepository
from .ports import CategoryStore, TaskStore, Transaction
from .task_repo import TaskRepository

__all__ = ["CategoryRepository", "CategoryStore", "TaskRepository", "TaskStore", "Transaction"]
