"""SQLModel storage for categories and the task/category join table."""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from ..errors import ConflictError, NotFoundError
from ..models import Category, Task, TaskCategoryLink, utcnow
from ..schemas import CategoryRead
from .base import storage_errors

logger = logging.getLogger(__name__)


class CategoryRepository:
    """Category rows plus association management.

    Writes are flushed, never committed: the caller owns the transaction.

    Attributes:
        session: Session every statement runs on
    """

    def __init__(self, session: Session):
        self.session = session

    def _get_row(self, category_id: int) -> Category:
        row = self.session.get(Category, category_id)
        if row is None:
            raise NotFoundError(f"category {category_id} not found")
        return row

    def _name_taken(self, name: str, exclude_id=None) -> bool:
        statement = select(Category.id).where(Category.name == name)
        if exclude_id is not None:
            statement = statement.where(Category.id != exclude_id)
        return self.session.exec(statement).first() is not None

    def create(self, category: Category) -> CategoryRead:
        """Insert a category and return it with its generated id.

        Raises:
            ConflictError: If another category already has this name
        """
        with storage_errors("create category"):
            if self._name_taken(category.name):
                raise ConflictError(f"category name {category.name!r} already exists")
            self.session.add(category)
            try:
                self.session.flush()
            except IntegrityError as e:
                raise ConflictError(f"category name {category.name!r} already exists") from e
            logger.debug(f"Category added id={category.id} name={category.name!r}")
            return CategoryRead.model_validate(category)

    def get_by_id(self, category_id: int) -> CategoryRead:
        with storage_errors("get category"):
            return CategoryRead.model_validate(self._get_row(category_id))

    def get_all(self) -> List[CategoryRead]:
        """All categories, sorted by name ascending."""
        with storage_errors("get categories"):
            rows = self.session.exec(select(Category).order_by(col(Category.name).asc()))
            return [CategoryRead.model_validate(row) for row in rows]

    def update(self, category) -> None:
        """Overwrite name, description, color and updated_at of ``category.id``."""
        with storage_errors("update category"):
            row = self._get_row(category.id)
            if self._name_taken(category.name, exclude_id=category.id):
                raise ConflictError(f"category name {category.name!r} already exists")
            row.name = category.name
            row.description = category.description
            row.color = category.color
            row.updated_at = category.updated_at or utcnow()
            self.session.add(row)
            try:
                self.session.flush()
            except IntegrityError as e:
                raise ConflictError(f"category name {category.name!r} already exists") from e

    def delete(self, category_id: int) -> None:
        """Delete a category and every association that references it.

        The tasks themselves are left intact.
        """
        with storage_errors("delete category"):
            row = self._get_row(category_id)
            links = self.session.exec(
                select(TaskCategoryLink).where(TaskCategoryLink.category_id == category_id)
            ).all()
            for link in links:
                self.session.delete(link)
            self.session.flush()
            self.session.delete(row)
            self.session.flush()
            logger.debug(f"Category deleted id={category_id} links_removed={len(links)}")

    def get_by_task_id(self, task_id: int) -> List[CategoryRead]:
        """Categories attached to a task, sorted by name."""
        return self.get_by_task_ids([task_id]).get(task_id, [])

    def get_by_task_ids(self, task_ids: Iterable[int]) -> Dict[int, List[CategoryRead]]:
        """Categories for several tasks at once, each list sorted by name."""
        ids = list(task_ids)
        if not ids:
            return {}
        with storage_errors("get categories for task"):
            statement = (
                select(TaskCategoryLink.task_id, Category)
                .join(Category, col(Category.id) == col(TaskCategoryLink.category_id))
                .where(col(TaskCategoryLink.task_id).in_(ids))
                .order_by(col(Category.name).asc())
            )
            grouped: Dict[int, List[CategoryRead]] = defaultdict(list)
            for task_id, category in self.session.exec(statement):
                grouped[task_id].append(CategoryRead.model_validate(category))
            return dict(grouped)

    def add_task_category(self, task_id: int, category_id: int) -> None:
        """Attach a category to a task.

        Raises:
            NotFoundError: If the task or the category does not exist
            ConflictError: If the pair is already attached
        """
        with storage_errors("add task category"):
            if self.session.get(Task, task_id) is None:
                raise NotFoundError(f"task {task_id} not found")
            self._get_row(category_id)
            if self.session.get(TaskCategoryLink, (task_id, category_id)) is not None:
                raise ConflictError(
                    f"category {category_id} is already attached to task {task_id}"
                )
            self.session.add(TaskCategoryLink(task_id=task_id, category_id=category_id))
            try:
                self.session.flush()
            except IntegrityError as e:
                raise ConflictError(
                    f"category {category_id} is already attached to task {task_id}"
                ) from e
            logger.debug(f"Task category added task_id={task_id} category_id={category_id}")

    def remove_task_category(self, task_id: int, category_id: int) -> None:
        with storage_errors("remove task category"):
            link = self.session.get(TaskCategoryLink, (task_id, category_id))
            if link is None:
                raise NotFoundError("task category relationship not found")
            self.session.delete(link)
            self.session.flush()

    def remove_all_task_categories(self, task_id: int) -> None:
        """Detach every category from a task. Succeeds when none are attached."""
        with storage_errors("remove all task categories"):
            links = self.session.exec(
                select(TaskCategoryLink).where(TaskCategoryLink.task_id == task_id)
            ).all()
            for link in links:
                self.session.delete(link)
            self.session.flush()
            logger.debug(f"Task categories cleared task_id={task_id} removed={len(links)}")
