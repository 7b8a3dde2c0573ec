"""Category operations."""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlmodel import Session

from ..models import Category, utcnow
from ..repositories import CategoryRepository, CategoryStore
from ..schemas import CategoryCreate, CategoryRead, CategoryUpdate
from ..validation import validate_category, validate_category_update, validate_id
from .base import TransactionalService

logger = logging.getLogger(__name__)


class CategoryService(TransactionalService):
    def __init__(
        self,
        session: Session,
        categories: Optional[CategoryStore] = None,
        atomic: bool = True,
        clock: Callable[[], datetime] = utcnow,
    ):
        super().__init__(session, atomic=atomic, clock=clock)
        self.categories = categories or CategoryRepository(session)

    def create_category(self, req: CategoryCreate) -> CategoryRead:
        validate_category(req)
        now = self.now()
        category = Category(
            name=req.name,
            description=req.description,
            color=req.color,
            created_at=now,
            updated_at=now,
        )
        with self.transaction("create category"):
            created = self.categories.create(category)
        logger.info(f"Category created id={created.id} name={created.name!r}")
        return created

    def get_category(self, category_id: int) -> CategoryRead:
        validate_id(category_id, "category")
        return self.categories.get_by_id(category_id)

    def get_all_categories(self) -> List[CategoryRead]:
        return self.categories.get_all()

    def update_category(self, category_id: int, req: CategoryUpdate) -> CategoryRead:
        """Apply the fields present in ``req``.

        An explicit null description or color clears it.
        """
        validate_id(category_id, "category")
        validate_category_update(req)
        changes = req.model_dump(exclude_unset=True)
        changes["updated_at"] = self.now()

        with self.transaction("update category"):
            existing = self.categories.get_by_id(category_id)
            updated = existing.model_copy(update=changes)
            self.categories.update(updated)
            result = self.categories.get_by_id(category_id)

        logger.info(f"Category updated id={category_id}")
        return result

    def delete_category(self, category_id: int) -> None:
        """Delete a category; tasks that carried it keep existing."""
        validate_id(category_id, "category")
        with self.transaction("delete category"):
            self.categories.delete(category_id)
        logger.info(f"Category deleted id={category_id}")
