"""Conversion between wire-level task payloads and Task records."""

from typing import Any

from marshmallow import ValidationError

from taskmanager.models import Task
from taskmanager.schemas import TaskRequestSchema, TaskSchema


_MUTABLE_FIELDS = ("title", "description", "completed")


def load_request(payload: Any) -> tuple[dict[str, Any] | None, dict[str, Any]]:
    """Validate a create/update request body.

    Args:
        payload: Decoded JSON body.

    Returns:
        Tuple of (data, errors). ``data`` holds the validated fields and is
        None when ``errors``, a mapping of field name to messages, is not empty.
    """
    try:
        return TaskRequestSchema().load(payload), {}
    except ValidationError as err:
        return None, err.normalized_messages()


def to_internal(data: dict[str, Any]) -> Task:
    """Build a new, unsaved Task from validated request data."""
    return Task(**{name: data[name] for name in _MUTABLE_FIELDS})


def apply_request(task: Task, data: dict[str, Any]) -> Task:
    """Overwrite the mutable fields of an existing task from validated request data.

    ``id`` and ``created_at`` are left as they are.
    """
    for name in _MUTABLE_FIELDS:
        setattr(task, name, data[name])
    return task


def to_external(task: Task) -> dict[str, Any]:
    """Render a task in its response shape."""
    return TaskSchema().dump(task)


def to_external_list(tasks: list[Task]) -> list[dict[str, Any]]:
    return TaskSchema(many=True).dump(tasks)
