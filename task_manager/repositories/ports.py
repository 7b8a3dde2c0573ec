"""
Ports (interfaces) the services depend on.

The services take these Protocols instead of the SQLModel repositories, so a
test can hand them in-memory doubles.
"""

from typing import Dict, Iterable, List, Optional, Protocol

from ..models import Category, Task
from ..schemas import CategoryRead, TaskFilters, TaskRead


class TaskStore(Protocol):
    def create(self, task: Task) -> TaskRead: ...

    def get_by_id(self, task_id: int) -> TaskRead: ...

    def list(self, filters: Optional[TaskFilters] = None) -> List[TaskRead]: ...

    def update(self, task) -> None: ...

    def delete(self, task_id: int) -> None: ...


class CategoryStore(Protocol):
    def create(self, category: Category) -> CategoryRead: ...

    def get_by_id(self, category_id: int) -> CategoryRead: ...

    def get_all(self) -> List[CategoryRead]: ...

    def update(self, category) -> None: ...

    def delete(self, category_id: int) -> None: ...

    def get_by_task_id(self, task_id: int) -> List[CategoryRead]: ...

    def get_by_task_ids(self, task_ids: Iterable[int]) -> Dict[int, List[CategoryRead]]: ...

    def add_task_category(self, task_id: int, category_id: int) -> None: ...

    def remove_task_category(self, task_id: int, category_id: int) -> None: ...

    def remove_all_task_categories(self, task_id: int) -> None: ...


class Transaction(Protocol):
    """The commit/rollback half of a SQLModel ``Session``."""

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
