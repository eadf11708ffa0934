"""Tests for the Task model."""

from datetime import datetime, timedelta, timezone

import pytest

from taskmanager.models import Task, UTCDateTime


class TestTaskDefaults:
    def test_new_task_is_unsaved(self):
        task = Task()
        assert task.completed is False
        assert task.id is None
        assert task.title is None
        assert task.description is None
        assert task.created_at is None
        assert task.updated_at is None

    def test_explicit_completed_kept(self):
        task = Task(title="Done", description="", completed=True)
        assert task.completed is True


class TestTaskEquality:
    def test_equal_when_all_fields_match(self):
        now = datetime.now(timezone.utc)
        first = Task(id=1, title="Task 1", description="d", created_at=now, updated_at=now)
        second = Task(id=1, title="Task 1", description="d", created_at=now, updated_at=now)
        assert first == second

    def test_unhashable(self):
        task = Task(id=1, title="Task 1", description="d")
        with pytest.raises(TypeError):
            hash(task)
        with pytest.raises(TypeError):
            {task}

    def test_not_equal_when_any_field_differs(self):
        first = Task(id=1, title="Task 1")
        assert first != Task(id=2, title="Task 1")
        assert first != Task(id=1, title="Task 2")
        assert first != Task(id=1, title="Task 1", completed=True)

    def test_not_equal_to_other_types(self):
        assert Task(id=1) != {"id": 1}

    def test_repr(self):
        task = Task(id=1, title="Test Task", description="Test Description", completed=True)
        text = repr(task)
        assert "Task" in text
        assert "id=1" in text
        assert "title='Test Task'" in text
        assert "description='Test Description'" in text
        assert "completed=True" in text


class TestUTCDateTime:
    def test_naive_values_are_treated_as_utc(self):
        column_type = UTCDateTime(timezone=True)
        naive = datetime(2024, 5, 1, 12, 0, 0)

        assert column_type.process_result_value(naive, None) == naive.replace(tzinfo=timezone.utc)
        assert column_type.process_bind_param(naive, None).tzinfo == timezone.utc

    def test_offsets_are_converted_to_utc(self):
        column_type = UTCDateTime(timezone=True)
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2024, 5, 1, 14, 0, 0, tzinfo=plus_two)

        bound = column_type.process_bind_param(value, None)
        assert bound == value
        assert bound.utcoffset() == timedelta(0)
        assert bound.hour == 12

    def test_none_passes_through(self):
        column_type = UTCDateTime(timezone=True)
        assert column_type.process_bind_param(None, None) is None
        assert column_type.process_result_value(None, None) is None
