"""Task CRUD endpoints."""

import logging

from flask import Blueprint, jsonify, request

from taskmanager.errors import error_response
from taskmanager.services import (
    apply_request,
    get_task_store,
    load_request,
    to_external,
    to_external_list,
    to_internal,
)
from taskmanager.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)

tasks_deleted = meter.create_counter(
    name="tasks.deleted",
    description="Tasks deleted",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/tasks")


def _load_body():
    """Return (data, None) for a valid task body, else (None, error response)."""
    payload = request.get_json(silent=True)
    if payload is None:
        return None, error_response("Request body must be valid JSON", 400)

    data, errors = load_request(payload)
    if errors:
        return None, error_response("Validation failed", 400, details=errors)

    return data, None


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    """List all tasks.

    Returns:
        JSON array of tasks, empty if there are none.
    """
    tasks = get_task_store().find_all()
    return jsonify(to_external_list(tasks))


@tasks_bp.route("", methods=["POST"])
def create_task():
    """Create a new task.

    Returns:
        JSON response with the created task and 201 status.
    """
    with tracer.start_as_current_span("task.create") as span:
        data, error = _load_body()
        if error:
            span.set_attribute("validation.status", "invalid")
            return error

        task = get_task_store().save(to_internal(data))

        span.set_attribute("task.id", task.id)
        tasks_created.add(1)
        logger.info(f"Task created: {task.id}")

        return jsonify(to_external(task)), 201


@tasks_bp.route("/<int:task_id>", methods=["GET"])
def get_task(task_id: int):
    """Get a single task by id.

    Args:
        task_id: Task id.

    Returns:
        JSON response with task data.
    """
    task = get_task_store().find_by_id(task_id)
    if task is None:
        return error_response("Task not found", 404)

    return jsonify(to_external(task))


@tasks_bp.route("/<int:task_id>", methods=["PUT"])
def update_task(task_id: int):
    """Replace a task's title, description and completion flag.

    Args:
        task_id: Task id.

    Returns:
        JSON response with the updated task.
    """
    with tracer.start_as_current_span("task.update") as span:
        span.set_attribute("task.id", task_id)

        data, error = _load_body()
        if error:
            span.set_attribute("validation.status", "invalid")
            return error

        store = get_task_store()
        task = store.find_by_id(task_id)
        if task is None:
            return error_response("Task not found", 404)

        task = store.save(apply_request(task, data))
        logger.info(f"Task updated: {task_id}")

        return jsonify(to_external(task))


@tasks_bp.route("/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int):
    """Delete a task.

    Args:
        task_id: Task id.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("task.delete") as span:
        span.set_attribute("task.id", task_id)

        store = get_task_store()
        task = store.find_by_id(task_id)
        if task is None:
            return error_response("Task not found", 404)

        store.delete(task)

        tasks_deleted.add(1)
        logger.info(f"Task deleted: {task_id}")

        return "", 204
