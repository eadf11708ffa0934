"""Marshmallow schemas for serialization and validation."""

from taskmanager.schemas.task import TaskRequestSchema, TaskSchema


__all__ = ["TaskSchema", "TaskRequestSchema"]
