"""Shared fixtures: SQLite engine per test, sessions and an API client."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from task_manager.config import Settings
from task_manager.db.session import create_db_and_tables, get_engine
from task_manager.main import create_app
from task_manager.repositories import CategoryRepository, TaskRepository

# Evaluation instant for the due-date rule in service tests.
FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0)


@pytest.fixture
def engine(tmp_path):
    """Create a temporary SQLite database with the schema in place."""
    engine = get_engine(f"sqlite:///{tmp_path / 'test_tasks.db'}")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def category_repo(session):
    return CategoryRepository(session)


@pytest.fixture
def task_repo(session, category_repo):
    return TaskRepository(session, category_repo)


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'api_tasks.db'}")


@pytest.fixture
def client(settings):
    """API client; entering the context runs the app's startup (schema creation)."""
    with TestClient(create_app(settings)) as client:
        yield client
