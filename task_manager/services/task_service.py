"""Task operations: validation, persistence and category sync."""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlmodel import Session

from ..models import Task, TaskPriority, TaskStatus, to_utc_naive, utcnow
from ..repositories import CategoryRepository, CategoryStore, TaskRepository, TaskStore
from ..schemas import TaskCreate, TaskFilters, TaskRead, TaskUpdate
from ..validation import (
    validate_create_task,
    validate_filters,
    validate_id,
    validate_update_task,
)
from .base import TransactionalService, distinct_ids

logger = logging.getLogger(__name__)


class TaskService(TransactionalService):
    """Composes validation, the task store and the category store.

    Attributes:
        tasks: Task store
        categories: Category store managing the associations
    """

    def __init__(
        self,
        session: Session,
        tasks: Optional[TaskStore] = None,
        categories: Optional[CategoryStore] = None,
        atomic: bool = True,
        clock: Callable[[], datetime] = utcnow,
    ):
        super().__init__(session, atomic=atomic, clock=clock)
        self.categories = categories or CategoryRepository(session)
        self.tasks = tasks or TaskRepository(session, self.categories)

    def _attach_categories(self, task_id: int, category_ids) -> None:
        for category_id in distinct_ids(category_ids):
            self.categories.add_task_category(task_id, category_id)
            self.checkpoint()

    def create_task(self, req: TaskCreate) -> TaskRead:
        """Create a task in status todo and attach the requested categories.

        The first failing attachment is raised. Whether the task and the
        attachments made before it survive depends on ``atomic``.
        """
        now = self.now()
        validate_create_task(req, now=now)

        task = Task(
            title=req.title,
            description=req.description or "",
            status=TaskStatus.TODO.value,
            priority=TaskPriority(req.priority).value,
            due_date=to_utc_naive(req.due_date),
            created_at=now,
            updated_at=now,
        )

        with self.transaction("create task"):
            created = self.tasks.create(task)
            self.checkpoint()
            self._attach_categories(created.id, req.category_ids)
            result = self.tasks.get_by_id(created.id)

        logger.info(f"Task created id={result.id} categories={[c.id for c in result.categories]}")
        return result

    def get_task(self, task_id: int) -> TaskRead:
        validate_id(task_id, "task")
        return self.tasks.get_by_id(task_id)

    def get_all_tasks(self) -> List[TaskRead]:
        return self.tasks.list()

    def get_tasks_with_filters(self, filters: Optional[TaskFilters] = None) -> List[TaskRead]:
        """List tasks; ``None`` means no filtering at all."""
        if filters is None:
            return self.get_all_tasks()
        validate_filters(filters.statuses, filters.priorities, filters.search)
        return self.tasks.list(filters)

    def update_task(self, task_id: int, req: TaskUpdate) -> TaskRead:
        """Apply the fields present in ``req``; absent fields stay unchanged.

        A ``category_ids`` list, even an empty one, replaces the task's whole
        category set.
        """
        validate_id(task_id, "task")
        now = self.now()
        validate_update_task(req, now=now)
        supplied = req.supplied()
        category_ids = supplied.pop("category_ids", None)

        changes = dict(supplied)
        if "description" in changes and changes["description"] is None:
            changes["description"] = ""
        if "status" in changes:
            changes["status"] = TaskStatus(changes["status"])
        if "priority" in changes:
            changes["priority"] = TaskPriority(changes["priority"])
        if "due_date" in changes:
            changes["due_date"] = to_utc_naive(changes["due_date"])
        changes["updated_at"] = now

        with self.transaction("update task"):
            existing = self.tasks.get_by_id(task_id)
            self.tasks.update(existing.model_copy(update=changes))
            self.checkpoint()

            if category_ids is not None:
                self.categories.remove_all_task_categories(task_id)
                self.checkpoint()
                self._attach_categories(task_id, category_ids)

            result = self.tasks.get_by_id(task_id)

        logger.info(f"Task updated id={task_id} fields={sorted(supplied)}")
        return result

    def delete_task(self, task_id: int) -> None:
        validate_id(task_id, "task")
        with self.transaction("delete task"):
            self.tasks.delete(task_id)
        logger.info(f"Task deleted id={task_id}")
