"""API route blueprints."""

from taskmanager.routes.health import health_bp
from taskmanager.routes.tasks import tasks_bp


__all__ = ["health_bp", "tasks_bp"]
