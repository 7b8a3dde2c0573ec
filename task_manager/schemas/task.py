from datetime import datetime
from typing import Iterable, List, Optional
from pydantic import BaseModel, Field
from sqlmodel import SQLModel

from ..models import TaskPriority, TaskStatus
from .category import CategoryRead


class TaskCreate(BaseModel):
    title: str
    description: str = ""
    # Accepted for compatibility; new tasks always start as "todo".
    status: Optional[str] = None
    priority: str = TaskPriority.MEDIUM.value
    due_date: Optional[datetime] = None
    category_ids: List[int] = Field(default_factory=list)


class TaskUpdate(BaseModel):
    """Partial update of a task.

    Presence is tracked through ``model_fields_set``: a field missing from the
    payload leaves the stored value untouched, while ``"due_date": null``
    clears the due date. ``category_ids`` replaces the whole category set when
    present (``[]`` clears it).
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[datetime] = None
    category_ids: Optional[List[int]] = None

    def supplied(self) -> dict:
        """Fields explicitly present in the request, including explicit nulls."""
        return self.model_dump(exclude_unset=True)


class TaskRead(SQLModel):
    id: int
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    categories: List[CategoryRead] = []


def _split_tokens(values: Optional[Iterable[str]]) -> List[str]:
    tokens: List[str] = []
    for value in values or []:
        tokens.extend(part.strip() for part in value.split(",") if part.strip())
    return tokens


class TaskFilters(BaseModel):
    """Constraint set narrowing a task listing.

    An empty dimension imposes no constraint.
    """
    statuses: List[str] = Field(default_factory=list)
    priorities: List[str] = Field(default_factory=list)
    search: str = ""

    @classmethod
    def from_query(
        cls,
        status: Optional[Iterable[str]] = None,
        priority: Optional[Iterable[str]] = None,
        search: Optional[str] = None,
    ) -> "TaskFilters":
        """Build filters from query values such as ``["todo,doing"]``.

        Blank tokens are dropped, so ``?status=`` filters nothing.
        """
        return cls(
            statuses=_split_tokens(status),
            priorities=_split_tokens(priority),
            search=search or "",
        )

    def is_empty(self) -> bool:
        return not self.statuses and not self.priorities and not self.search
