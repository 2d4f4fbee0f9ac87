"""Tests des endpoints de santé."""

from datetime import datetime

from app import __version__


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"status", "timestamp", "uptimeSeconds", "version"}
    assert data["status"] == "healthy"
    assert data["version"] == __version__
    assert isinstance(data["uptimeSeconds"], int)
    assert data["uptimeSeconds"] >= 0
    assert data["timestamp"].endswith("Z")
    parsed = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


def test_health_has_request_id(client):
    response = client.get("/health", headers={"x-request-id": "req-health-1"})
    assert response.headers["x-request-id"] == "req-health-1"


def test_health_db(client):
    response = client.get("/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "ok"}


def test_health_db_unreachable(client, monkeypatch):
    async def failing_ping():
        raise ConnectionError("connection refused")

    database = client.app.state.database
    monkeypatch.setattr(database, "ping", failing_ping)

    response = client.get("/health/db")

    assert response.status_code == 503
    data = response.json()
    assert data["title"] == "Service Unavailable"
    assert data["detail"] == "Database is unreachable"
