"""HTTP metrics middleware."""

import time

from flask import Flask, g, request

from taskmanager.telemetry import get_meter


def register_metrics_middleware(app: Flask) -> None:
    """Record a request counter and latency histogram for every task API call.

    Each measurement is labelled with the HTTP method, the route pattern,
    the view that handled it (e.g. ``tasks.update_task``) and the status code.
    The health check is not measured.

    Args:
        app: Flask application instance.
    """
    meter = get_meter(__name__)

    requests_total = meter.create_counter(
        name="taskmanager.http.requests",
        description="Task API requests",
        unit="1",
    )

    request_duration = meter.create_histogram(
        name="taskmanager.http.request.duration",
        description="Task API request duration",
        unit="ms",
    )

    @app.before_request
    def start_timer() -> None:
        g.request_start_time = time.perf_counter()

    @app.after_request
    def record_request(response):
        if request.path == "/api/health":
            return response

        start_time = getattr(g, "request_start_time", None)
        duration_ms = (time.perf_counter() - start_time) * 1000 if start_time else 0

        attributes = {
            "http.method": request.method,
            "http.route": request.url_rule.rule if request.url_rule else "unmatched",
            "task.operation": request.endpoint or "unknown",
            "http.status_code": str(response.status_code),
        }

        requests_total.add(1, attributes)
        request_duration.record(duration_ms, attributes)

        return response
