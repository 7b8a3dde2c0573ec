"""Field and filter validation run before every write.

Every function here is side-effect free. Checks raise ``ValidationError``
labeled with the offending field; ``validate_color`` and the ``is_valid_*``
helpers are plain predicates.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from .errors import ValidationError
from .models import Task, TaskPriority, TaskStatus, to_utc_naive, utcnow
from .models.category import CATEGORY_DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from .models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from .schemas import CategoryCreate, CategoryUpdate, TaskCreate, TaskUpdate

_HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")

STATUS_VALUES = frozenset(s.value for s in TaskStatus)
PRIORITY_VALUES = frozenset(p.value for p in TaskPriority)


def _raw(value):
    return value.value if isinstance(value, Enum) else value


def is_valid_status(value) -> bool:
    return _raw(value) in STATUS_VALUES


def is_valid_priority(value) -> bool:
    return _raw(value) in PRIORITY_VALUES


def validate_color(color: str) -> bool:
    """True for ``#RRGGBB`` hex codes, case-insensitive."""
    return isinstance(color, str) and len(color) == 7 and _HEX_COLOR.fullmatch(color) is not None


def validate_id(value: int, kind: str = "task") -> None:
    if value is None or value <= 0:
        raise ValidationError(f"invalid {kind} id", field="id")


def _check_title(title: Optional[str]) -> None:
    if title is None or title == "":
        raise ValidationError("title is required", field="title")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"title must be at most {TITLE_MAX_LENGTH} characters", field="title"
        )


def _check_description(description: Optional[str]) -> None:
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )


def _check_status(status) -> None:
    if not is_valid_status(status):
        raise ValidationError(f"invalid status: {status!r}", field="status")


def _check_priority(priority) -> None:
    if not is_valid_priority(priority):
        raise ValidationError(f"invalid priority: {priority!r}", field="priority")


def _check_due_date(due_date: Optional[datetime], now: Optional[datetime]) -> None:
    """The due date must lie strictly after the evaluation instant."""
    if due_date is None:
        return
    instant = to_utc_naive(now) if now is not None else utcnow()
    if to_utc_naive(due_date) <= instant:
        raise ValidationError("due date must be in the future", field="due_date")


def validate_create_task(req: TaskCreate, now: Optional[datetime] = None) -> None:
    """Validate a create request.

    The request's status is not checked: new tasks always start as todo.
    """
    _check_title(req.title)
    _check_description(req.description)
    _check_priority(req.priority)
    _check_due_date(req.due_date, now)


def validate_task(task: Task, now: Optional[datetime] = None) -> None:
    """Validate a complete task row, including its due date."""
    _check_title(task.title)
    _check_description(task.description)
    _check_status(task.status)
    _check_priority(task.priority)
    _check_due_date(task.due_date, now)


def validate_update_task(req: TaskUpdate, now: Optional[datetime] = None) -> None:
    """Validate only the fields present in the update request.

    Explicit nulls are rejected for the non-nullable columns; a null due
    date is accepted and clears it.
    """
    supplied = req.supplied()

    if "title" in supplied:
        if supplied["title"] is None:
            raise ValidationError("title cannot be null", field="title")
        if supplied["title"] == "":
            raise ValidationError("title cannot be empty", field="title")
        _check_title(supplied["title"])
    if "description" in supplied:
        _check_description(supplied["description"])
    if "status" in supplied:
        _check_status(supplied["status"])
    if "priority" in supplied:
        _check_priority(supplied["priority"])
    if "due_date" in supplied:
        _check_due_date(supplied["due_date"], now)


def validate_filters(
    statuses: Iterable[str] = (),
    priorities: Iterable[str] = (),
    search: Optional[str] = None,
) -> None:
    """Every status and priority token must name an enum member.

    The search string is free text; an empty one filters nothing.
    """
    for token in statuses or ():
        if not is_valid_status(token):
            raise ValidationError(f"invalid status filter: {token!r}", field="status")
    for token in priorities or ():
        if not is_valid_priority(token):
            raise ValidationError(f"invalid priority filter: {token!r}", field="priority")


def _check_category_name(name: Optional[str], required_message: str) -> None:
    if name is None or name == "":
        raise ValidationError(required_message, field="name")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"category name must be {NAME_MAX_LENGTH} characters or less", field="name"
        )


def _check_category_extras(description: Optional[str], color: Optional[str]) -> None:
    if description is not None and len(description) > CATEGORY_DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"category description must be {CATEGORY_DESCRIPTION_MAX_LENGTH} characters or less",
            field="description",
        )
    if color is not None and not validate_color(color):
        raise ValidationError(
            "category color must be a valid hex color code", field="color"
        )


def validate_category(req: CategoryCreate) -> None:
    _check_category_name(req.name, "category name is required")
    _check_category_extras(req.description, req.color)


def validate_category_update(req: CategoryUpdate) -> None:
    supplied = req.model_dump(exclude_unset=True)
    if "name" in supplied:
        _check_category_name(supplied["name"], "category name cannot be empty")
    _check_category_extras(supplied.get("description"), supplied.get("color"))
