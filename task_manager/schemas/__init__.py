"""Request and response schemas."""
from .category import CategoryCreate, CategoryRead, CategoryUpdate
from .task import TaskCreate, TaskFilters, TaskRead, TaskUpdate

__all__ = [
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "TaskCreate",
    "TaskFilters",
    "TaskRead",
    "TaskUpdate",
]
