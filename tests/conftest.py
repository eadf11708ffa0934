"""Pytest fixtures for task manager testing."""

import os

import pytest


# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"


@pytest.fixture
def app():
    """Create test application."""
    from taskmanager import create_app
    from taskmanager.config import TestConfig

    app = create_app(TestConfig)

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from taskmanager.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def store(app, db):
    """TaskStore bound to the test database."""
    from taskmanager.services import get_task_store

    return get_task_store()


@pytest.fixture
def task_payload():
    return {
        "title": "Sample Task",
        "description": "Sample Description",
        "completed": False,
    }
