"""Error kinds raised by the validators, stores and services.

The HTTP layer maps them to status codes:
ValidationError -> 400, NotFoundError -> 404, ConflictError -> 409,
StorageError -> 500.
"""

from typing import Optional


class TaskManagerError(Exception):
    """Base class for every error the core raises."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(TaskManagerError):
    """Malformed or out-of-range input.

    Attributes:
        field: Name of the offending field, if one applies
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(TaskManagerError):
    """A referenced task, category or association does not exist."""


class ConflictError(TaskManagerError):
    """Duplicate category name or duplicate association."""


class StorageError(TaskManagerError):
    """Unclassified failure reported by the storage engine."""
