"""Flask application factory with OpenTelemetry instrumentation."""

import logging
import os

from flask import Flask

from taskmanager.extensions import db, ma


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    telemetry_enabled = not os.getenv("OTEL_SDK_DISABLED")

    # Initialize telemetry BEFORE creating Flask app
    if telemetry_enabled:
        from taskmanager.telemetry import (
            get_otel_log_handler,
            instrument_flask_app,
            setup_telemetry,
        )

        setup_telemetry()

    app = Flask(__name__)

    # Instrument Flask app (needed for Gunicorn worker forks)
    if telemetry_enabled:
        instrument_flask_app(app)

    # Load configuration
    if config_class is None:
        from taskmanager.config import Config

        config_class = Config
    app.config.from_object(config_class)
    app.json.sort_keys = False

    # Initialize extensions
    db.init_app(app)
    ma.init_app(app)

    # Register blueprints
    from taskmanager.routes import health_bp, tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(tasks_bp)

    # Register error handlers
    from taskmanager.errors import register_error_handlers

    register_error_handlers(app)

    if telemetry_enabled:
        from taskmanager.middleware import register_metrics_middleware

        register_metrics_middleware(app)

        handler = get_otel_log_handler()
        if handler:
            root_logger = logging.getLogger()
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)

    _configure_logging()

    # One store per process, backed by the scoped session
    from taskmanager.services import TaskStore

    app.extensions["task_store"] = TaskStore(db.session)

    with app.app_context():
        db.create_all()

    return app


def _configure_logging() -> None:
    """Configure logging for the application."""
    # App loggers propagate to root, where the OTel handler is
    logging.getLogger("taskmanager").setLevel(logging.DEBUG)
    logging.getLogger("taskmanager").propagate = True

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").propagate = False

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
