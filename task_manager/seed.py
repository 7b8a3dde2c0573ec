"""Fill the database with sample tasks: ``python -m task_manager.seed``."""

import logging

from sqlmodel import Session

from .config import get_settings
from .db.session import create_db_and_tables, get_engine
from .logging_setup import setup_logging
from .models import Task, TaskPriority, TaskStatus
from .repositories import TaskRepository

logger = logging.getLogger(__name__)

SAMPLE_TASKS = [
    (
        "Complete project documentation",
        "Write comprehensive documentation for the task manager API",
        TaskPriority.HIGH,
    ),
    (
        "Implement user authentication",
        "Add JWT-based authentication system",
        TaskPriority.CRITICAL,
    ),
    (
        "Add task categories",
        "Allow users to organize tasks by categories",
        TaskPriority.MEDIUM,
    ),
    (
        "Optimize database queries",
        "Review and optimize slow database queries",
        TaskPriority.LOW,
    ),
    (
        "Add task due dates",
        "Implement due date functionality for tasks",
        TaskPriority.HIGH,
    ),
]


def seed(session: Session) -> int:
    """Insert the sample tasks and return how many were created."""
    repo = TaskRepository(session)
    created = 0
    for title, description, priority in SAMPLE_TASKS:
        task = repo.create(
            Task(
                title=title,
                description=description,
                status=TaskStatus.TODO.value,
                priority=priority.value,
            )
        )
        session.commit()
        print(f"Created task: {task.title} (Priority: {task.priority.value})")
        created += 1
    return created


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    engine = get_engine(settings.database_url, echo=settings.sql_echo)
    create_db_and_tables(engine)
    try:
        with Session(engine) as session:
            seed(session)
    finally:
        engine.dispose()
    print("Database seeded successfully!")


if __name__ == "__main__":
    main()
