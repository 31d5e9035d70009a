"""Tests for the application shell: liveness, readiness and error conversion."""

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

import taskboard.api.health as health_api
from taskboard.config import settings

from .helpers import auth_headers


def test_root_reports_running(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "API running"}


def test_health_ok(client: TestClient, monkeypatch):
    async def _connected():
        return True

    monkeypatch.setattr(health_api, "check_db_connection", _connected)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_health_unavailable(client: TestClient, monkeypatch):
    async def _disconnected():
        raise RuntimeError("Database connectivity check failed.")

    monkeypatch.setattr(health_api, "check_db_connection", _disconnected)

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"detail": settings.db_unavailable_hint}


def test_store_failure_is_500(client: TestClient, alice: dict, task_db_handler):
    async def _broken(owner_id):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    task_db_handler.get_tasks_by_owner = _broken

    response = client.get("/api/tasks", headers=auth_headers(alice["token"]))

    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}


def test_cors_allows_configured_origin(client: TestClient):
    origin = settings.cors_allow_origins[0]

    response = client.options(
        "/api/tasks",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Authorization",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == origin
