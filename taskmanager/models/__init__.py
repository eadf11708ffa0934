"""Database models."""

from taskmanager.models.task import Task, UTCDateTime


__all__ = ["Task", "UTCDateTime"]
