"""SQLModel storage for tasks: CRUD plus the filtered, sorted listing."""

import logging
from typing import List, Optional

from sqlalchemy import String, case, func, or_
from sqlmodel import Session, col, select

from ..errors import NotFoundError
from ..models import PRIORITY_ORDER, Task, utcnow
from ..schemas import TaskFilters, TaskRead
from .base import storage_errors
from .category_repo import CategoryRepository

logger = logging.getLogger(__name__)


class TaskRepository:
    """Task rows, returned as ``TaskRead`` views with their categories attached.

    Writes are flushed, never committed: the caller owns the transaction.

    Attributes:
        session: Session every statement runs on
        categories: Category repository used to load and clear associations
    """

    def __init__(self, session: Session, categories: Optional[CategoryRepository] = None):
        self.session = session
        self.categories = categories or CategoryRepository(session)

    def _get_row(self, task_id: int) -> Task:
        row = self.session.get(Task, task_id)
        if row is None:
            raise NotFoundError(f"task {task_id} not found")
        return row

    def _to_read(self, row: Task, categories=None) -> TaskRead:
        return TaskRead.model_validate(row, update={"categories": categories or []})

    def create(self, task: Task) -> TaskRead:
        """Insert a task and return it with its generated id and no categories."""
        with storage_errors("create task"):
            self.session.add(task)
            self.session.flush()
            logger.debug(
                f"Task added id={task.id} status={task.status} priority={task.priority} "
                f"due_date={task.due_date}"
            )
            return self._to_read(task)

    def get_by_id(self, task_id: int) -> TaskRead:
        with storage_errors("get task"):
            row = self._get_row(task_id)
            return self._to_read(row, self.categories.get_by_task_id(task_id))

    def list(self, filters: Optional[TaskFilters] = None) -> List[TaskRead]:
        """List tasks matching ``filters`` (all tasks when None).

        A task matches when its status is in ``statuses``, its priority is in
        ``priorities`` and ``search`` occurs in its title or description,
        case-insensitively; an empty dimension matches everything.

        Order: dated tasks first by ascending due date, then priority from
        critical down to low, then creation time, then id.
        """
        statement = select(Task)

        if filters is not None:
            if filters.statuses:
                statement = statement.where(col(Task.status).in_(filters.statuses))
            if filters.priorities:
                statement = statement.where(col(Task.priority).in_(filters.priorities))
            if filters.search:
                term = filters.search.lower()
                statement = statement.where(
                    or_(
                        func.lower(col(Task.title), type_=String).contains(term, autoescape=True),
                        func.lower(col(Task.description), type_=String).contains(
                            term, autoescape=True
                        ),
                    )
                )

        undated_last = case((col(Task.due_date).is_(None), 1), else_=0)
        priority_rank = case(PRIORITY_ORDER, value=col(Task.priority), else_=0)
        statement = statement.order_by(
            undated_last,
            col(Task.due_date).asc(),
            priority_rank.desc(),
            col(Task.created_at).asc(),
            col(Task.id).asc(),
        )

        with storage_errors("query tasks"):
            rows = self.session.exec(statement).all()
            by_task = self.categories.get_by_task_ids(row.id for row in rows)
            return [self._to_read(row, by_task.get(row.id)) for row in rows]

    def update(self, task) -> None:
        """Overwrite the mutable fields and updated_at of ``task.id``."""
        with storage_errors("update task"):
            row = self._get_row(task.id)
            row.title = task.title
            row.description = task.description
            row.status = getattr(task.status, "value", task.status)
            row.priority = getattr(task.priority, "value", task.priority)
            row.due_date = task.due_date
            row.updated_at = task.updated_at or utcnow()
            self.session.add(row)
            self.session.flush()

    def delete(self, task_id: int) -> None:
        """Delete a task together with its association rows."""
        with storage_errors("delete task"):
            row = self._get_row(task_id)
            self.categories.remove_all_task_categories(task_id)
            self.session.delete(row)
            self.session.flush()
            logger.debug(f"Task deleted id={task_id}")
