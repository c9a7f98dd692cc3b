# tests/test_validation.py

from __future__ import annotations

from datetime import date

import pytest

from taskman.core.errors import ValidationError
from taskman.schemas.tasks import Task
from taskman.services.validation import TITLE_REQUIRED, ensure_valid, validate_task


def test_missing_title_is_reported_as_value() -> None:
    errors = validate_task(Task())
    assert len(errors) == 1
    assert errors[0].field == "title"
    assert errors[0].message == "Title is required"


def test_missing_title_raises_on_ensure() -> None:
    with pytest.raises(ValidationError, match="Title is required"):
        ensure_valid(Task(title=None, completed=True))


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        ensure_valid(Task())


@pytest.mark.parametrize(
    "task",
    [
        Task(title="t"),
        Task(title="", description=None),
        Task(title="t", due_date=date(1999, 12, 31), completed=True),
        Task(id=99, title="t", description="long " * 100),
    ],
)
def test_any_non_null_title_is_valid(task: Task) -> None:
    assert validate_task(task) == []
    assert ensure_valid(task) is task


def test_rejected_task_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="taskman.services.validation"):
        with pytest.raises(ValidationError):
            ensure_valid(Task())
    assert TITLE_REQUIRED in caplog.text
