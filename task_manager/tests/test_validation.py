"""Unit tests for the field, temporal and filter validators."""

from datetime import datetime, timedelta, timezone

import pytest

from task_manager.errors import ValidationError
from task_manager.models import Task
from task_manager.schemas import CategoryCreate, CategoryUpdate, TaskCreate, TaskUpdate
from task_manager.validation import (
    is_valid_priority,
    is_valid_status,
    validate_category,
    validate_category_update,
    validate_color,
    validate_create_task,
    validate_filters,
    validate_id,
    validate_task,
    validate_update_task,
)

NOW = datetime(2024, 6, 1, 12, 0, 0)


@pytest.mark.parametrize(
    "color, expected",
    [
        ("#FF0000", True),
        ("#00ff7f", True),
        ("#aBcDeF", True),
        ("FF0000", False),
        ("#FF", False),
        ("#GG0000", False),
        ("#FF00000", False),
        ("", False),
    ],
)
def test_validate_color(color, expected):
    assert validate_color(color) is expected


def test_enum_predicates():
    assert is_valid_status("doing")
    assert not is_valid_status("pending")
    assert is_valid_priority("critical")
    assert not is_valid_priority("urgent")


class TestCreateTask:
    def test_valid_request(self):
        validate_create_task(TaskCreate(title="Write docs", priority="high"), now=NOW)

    def test_empty_title(self):
        with pytest.raises(ValidationError) as exc:
            validate_create_task(TaskCreate(title=""), now=NOW)
        assert exc.value.field == "title"

    def test_title_length_bounds(self):
        validate_create_task(TaskCreate(title="x" * 200), now=NOW)
        with pytest.raises(ValidationError):
            validate_create_task(TaskCreate(title="x" * 201), now=NOW)

    def test_description_too_long(self):
        validate_create_task(TaskCreate(title="t", description="d" * 1000), now=NOW)
        with pytest.raises(ValidationError) as exc:
            validate_create_task(TaskCreate(title="t", description="d" * 1001), now=NOW)
        assert exc.value.field == "description"

    def test_invalid_priority(self):
        with pytest.raises(ValidationError) as exc:
            validate_create_task(TaskCreate(title="t", priority="urgent"), now=NOW)
        assert exc.value.field == "priority"

    def test_status_is_not_checked(self):
        validate_create_task(TaskCreate(title="t", status="bogus"), now=NOW)

    def test_past_due_date_rejected(self):
        with pytest.raises(ValidationError) as exc:
            validate_create_task(
                TaskCreate(title="t", due_date=NOW - timedelta(minutes=5)), now=NOW
            )
        assert exc.value.field == "due_date"

    def test_earlier_the_same_day_is_rejected(self):
        with pytest.raises(ValidationError):
            validate_create_task(TaskCreate(title="t", due_date=NOW.replace(hour=1)), now=NOW)

    def test_due_date_equal_to_now_rejected(self):
        with pytest.raises(ValidationError):
            validate_create_task(TaskCreate(title="t", due_date=NOW), now=NOW)

    def test_future_due_date_accepted(self):
        validate_create_task(TaskCreate(title="t", due_date=NOW + timedelta(minutes=1)), now=NOW)

    def test_aware_due_date_is_compared_in_utc(self):
        # 13:30 at UTC+2 is 11:30 UTC, half an hour before NOW
        due = datetime(2024, 6, 1, 13, 30, tzinfo=timezone(timedelta(hours=2)))
        with pytest.raises(ValidationError):
            validate_create_task(TaskCreate(title="t", due_date=due), now=NOW)

    def test_default_evaluation_instant_is_current_time(self):
        validate_create_task(
            TaskCreate(title="t", due_date=datetime.now(timezone.utc) + timedelta(hours=1))
        )
        with pytest.raises(ValidationError):
            validate_create_task(
                TaskCreate(title="t", due_date=datetime.now(timezone.utc) - timedelta(hours=1))
            )


def test_validate_task_checks_status():
    task = Task(title="t", status="archived", priority="low")
    with pytest.raises(ValidationError) as exc:
        validate_task(task, now=NOW)
    assert exc.value.field == "status"


class TestUpdateTask:
    def test_empty_request_is_valid(self):
        validate_update_task(TaskUpdate(), now=NOW)

    def test_only_supplied_fields_are_checked(self):
        validate_update_task(TaskUpdate(status="done"), now=NOW)
        with pytest.raises(ValidationError):
            validate_update_task(TaskUpdate(status="finished"), now=NOW)

    def test_empty_title(self):
        with pytest.raises(ValidationError, match="title cannot be empty"):
            validate_update_task(TaskUpdate(title=""), now=NOW)

    def test_null_title(self):
        with pytest.raises(ValidationError):
            validate_update_task(TaskUpdate(title=None), now=NOW)

    def test_null_due_date_clears(self):
        validate_update_task(TaskUpdate(due_date=None), now=NOW)

    def test_past_due_date(self):
        with pytest.raises(ValidationError):
            validate_update_task(TaskUpdate(due_date=NOW - timedelta(days=1)), now=NOW)

    def test_invalid_priority(self):
        with pytest.raises(ValidationError):
            validate_update_task(TaskUpdate(priority="extreme"), now=NOW)


class TestFilters:
    def test_valid_tokens(self):
        validate_filters(["todo", "doing"], ["high", "critical"], "")

    def test_empty_dimensions(self):
        validate_filters([], [], "")
        validate_filters(None, None, None)

    def test_unknown_status_names_token(self):
        with pytest.raises(ValidationError, match="invalid"):
            validate_filters(["todo", "invalid"], [], "")
        with pytest.raises(ValidationError) as exc:
            validate_filters(["archived"], [], "")
        assert "archived" in str(exc.value)

    def test_unknown_priority_names_token(self):
        with pytest.raises(ValidationError) as exc:
            validate_filters([], ["urgent"], "")
        assert "urgent" in str(exc.value)
        assert exc.value.field == "priority"


class TestCategory:
    def test_valid(self):
        validate_category(CategoryCreate(name="Work", description="Job stuff", color="#00FF00"))

    def test_name_required(self):
        with pytest.raises(ValidationError, match="category name is required"):
            validate_category(CategoryCreate(name=""))

    def test_name_too_long(self):
        validate_category(CategoryCreate(name="n" * 100))
        with pytest.raises(ValidationError):
            validate_category(CategoryCreate(name="n" * 101))

    def test_description_too_long(self):
        with pytest.raises(ValidationError):
            validate_category(CategoryCreate(name="Work", description="d" * 501))

    def test_bad_color(self):
        with pytest.raises(ValidationError) as exc:
            validate_category(CategoryCreate(name="Work", color="red"))
        assert exc.value.field == "color"

    def test_update_only_checks_supplied(self):
        validate_category_update(CategoryUpdate())
        validate_category_update(CategoryUpdate(color=None))
        with pytest.raises(ValidationError, match="category name cannot be empty"):
            validate_category_update(CategoryUpdate(name=""))
        with pytest.raises(ValidationError):
            validate_category_update(CategoryUpdate(color="#12345"))


def test_validate_id():
    validate_id(1)
    for bad in (0, -3):
        with pytest.raises(ValidationError):
            validate_id(bad)
