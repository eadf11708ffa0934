"""Middleware modules."""

from taskmanager.middleware.metrics import register_metrics_middleware


__all__ = ["register_metrics_middleware"]
