"""Tests for todo.models module."""

from __future__ import annotations

import time

import pytest
from pydantic import ValidationError

from todo.models import Task, now_epoch


class TestTask:
    """Tests for Task model."""

    def test_defaults(self) -> None:
        """Test a new task starts pending."""
        task = Task(id=1, text="buy milk", created_at=1700000000)
        assert task.done is False

    def test_field_order(self) -> None:
        """Test serialisation keeps the on-disk field order."""
        task = Task(id=1, text="buy milk", created_at=1700000000)
        assert list(task.model_dump()) == ["id", "text", "done", "created_at"]

    def test_extra_keys_ignored(self) -> None:
        """Test unknown keys in stored records are dropped."""
        task = Task.model_validate(
            {"id": 1, "text": "x", "done": False, "created_at": 0, "priority": "high"}
        )
        assert "priority" not in task.model_dump()

    def test_rejects_non_positive_id(self) -> None:
        """Test ids must be positive."""
        with pytest.raises(ValidationError):
            Task(id=0, text="x", created_at=0)

    def test_requires_created_at(self) -> None:
        """Test missing timestamp is rejected."""
        with pytest.raises(ValidationError):
            Task.model_validate({"id": 1, "text": "x", "done": False})

    def test_empty_text_allowed(self) -> None:
        """Test empty text is accepted as-is."""
        assert Task(id=1, text="", created_at=0).text == ""


def test_now_epoch_is_whole_seconds() -> None:
    """Test now_epoch returns an int close to time.time()."""
    value = now_epoch()
    assert isinstance(value, int)
    assert abs(value - time.time()) < 5
