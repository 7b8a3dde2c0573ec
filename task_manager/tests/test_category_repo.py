"""Tests for CategoryRepository and the association table."""

from datetime import datetime

import pytest

from task_manager.errors import ConflictError, NotFoundError
from task_manager.models import Category, Task


@pytest.fixture
def task_id(task_repo):
    return task_repo.create(Task(title="Tagged task")).id


def test_create_and_get(category_repo):
    created = category_repo.create(Category(name="Work", description="Job", color="#FF0000"))

    loaded = category_repo.get_by_id(created.id)
    assert loaded.name == "Work"
    assert loaded.description == "Job"
    assert loaded.color == "#FF0000"


def test_optional_fields_default_to_none(category_repo):
    created = category_repo.create(Category(name="Bare"))
    assert created.description is None
    assert created.color is None


def test_duplicate_name_conflicts(category_repo):
    category_repo.create(Category(name="Work"))
    with pytest.raises(ConflictError):
        category_repo.create(Category(name="Work"))


def test_get_all_sorted_by_name(category_repo):
    for name in ("Personal", "Errands", "Work"):
        category_repo.create(Category(name=name))

    assert [c.name for c in category_repo.get_all()] == ["Errands", "Personal", "Work"]


def test_get_missing(category_repo):
    with pytest.raises(NotFoundError):
        category_repo.get_by_id(42)


def test_update(category_repo):
    created = category_repo.create(Category(name="Work", color="#FF0000"))
    stamp = datetime(2024, 1, 1, 10, 0)

    category_repo.update(
        created.model_copy(update={"name": "Job", "color": None, "updated_at": stamp})
    )

    loaded = category_repo.get_by_id(created.id)
    assert loaded.name == "Job"
    assert loaded.color is None
    assert loaded.updated_at == stamp


def test_update_to_taken_name_conflicts(category_repo):
    category_repo.create(Category(name="Work"))
    home = category_repo.create(Category(name="Home"))

    with pytest.raises(ConflictError):
        category_repo.update(home.model_copy(update={"name": "Work"}))


def test_update_missing(category_repo):
    created = category_repo.create(Category(name="Work"))
    with pytest.raises(NotFoundError):
        category_repo.update(created.model_copy(update={"id": 999}))


def test_add_and_get_by_task_id_sorted(category_repo, task_id):
    work = category_repo.create(Category(name="Work"))
    admin = category_repo.create(Category(name="Admin"))
    category_repo.add_task_category(task_id, work.id)
    category_repo.add_task_category(task_id, admin.id)

    assert [c.name for c in category_repo.get_by_task_id(task_id)] == ["Admin", "Work"]


def test_add_duplicate_pair_conflicts(category_repo, task_id):
    work = category_repo.create(Category(name="Work"))
    category_repo.add_task_category(task_id, work.id)

    with pytest.raises(ConflictError):
        category_repo.add_task_category(task_id, work.id)


def test_add_unknown_category_or_task(category_repo, task_id):
    work = category_repo.create(Category(name="Work"))

    with pytest.raises(NotFoundError):
        category_repo.add_task_category(task_id, 999)
    with pytest.raises(NotFoundError):
        category_repo.add_task_category(999, work.id)


def test_remove_task_category(category_repo, task_id):
    work = category_repo.create(Category(name="Work"))
    category_repo.add_task_category(task_id, work.id)

    category_repo.remove_task_category(task_id, work.id)

    assert category_repo.get_by_task_id(task_id) == []
    with pytest.raises(NotFoundError):
        category_repo.remove_task_category(task_id, work.id)


def test_remove_all_is_idempotent(category_repo, task_id):
    category_repo.remove_all_task_categories(task_id)

    for name in ("A", "B"):
        category_repo.add_task_category(task_id, category_repo.create(Category(name=name)).id)
    category_repo.remove_all_task_categories(task_id)
    category_repo.remove_all_task_categories(task_id)

    assert category_repo.get_by_task_id(task_id) == []


def test_delete_category_detaches_but_keeps_tasks(task_repo, category_repo, task_id):
    work = category_repo.create(Category(name="Work"))
    home = category_repo.create(Category(name="Home"))
    other = task_repo.create(Task(title="Other task")).id
    for tid in (task_id, other):
        category_repo.add_task_category(tid, work.id)
        category_repo.add_task_category(tid, home.id)

    category_repo.delete(work.id)

    assert [c.name for c in task_repo.get_by_id(task_id).categories] == ["Home"]
    assert [c.name for c in task_repo.get_by_id(other).categories] == ["Home"]
    with pytest.raises(NotFoundError):
        category_repo.get_by_id(work.id)
    with pytest.raises(NotFoundError):
        category_repo.delete(work.id)


def test_get_by_task_ids_groups_per_task(task_repo, category_repo, task_id):
    other = task_repo.create(Task(title="Other task")).id
    work = category_repo.create(Category(name="Work"))
    category_repo.add_task_category(task_id, work.id)

    grouped = category_repo.get_by_task_ids([task_id, other])
    assert [c.name for c in grouped[task_id]] == ["Work"]
    assert other not in grouped
    assert category_repo.get_by_task_ids([]) == {}
