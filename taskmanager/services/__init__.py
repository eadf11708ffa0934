"""Service modules."""

from flask import current_app

from taskmanager.services.mapper import (
    apply_request,
    load_request,
    to_external,
    to_external_list,
    to_internal,
)
from taskmanager.services.task_store import TaskStore


def get_task_store() -> TaskStore:
    """Return the TaskStore shared by the current application."""
    return current_app.extensions["task_store"]


__all__ = [
    "TaskStore",
    "get_task_store",
    "load_request",
    "to_internal",
    "apply_request",
    "to_external",
    "to_external_list",
]
