"""Tests for the application factory and error handlers."""

from taskmanager.services import TaskStore


class TestCreateApp:
    def test_blueprints_registered(self, app):
        assert "tasks" in app.blueprints
        assert "health" in app.blueprints

    def test_task_store_attached(self, app):
        assert isinstance(app.extensions["task_store"], TaskStore)

    def test_testing_config(self, app):
        assert app.config["TESTING"] is True
        assert app.config["SQLALCHEMY_DATABASE_URI"] == "sqlite://"


class TestErrorHandlers:
    def test_unknown_route(self, client, db):
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.get_json() == {"error": "Not found", "status": 404}

    def test_method_not_allowed(self, client, db):
        response = client.patch("/tasks/1", json={})
        assert response.status_code == 405
        assert response.get_json()["status"] == 405
