"""Tests for the health endpoint."""

from unittest.mock import patch


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "healthy"
    assert data["tasks"] == 3
    assert data["service"]["name"] == "tareas-api"


def test_health_unhealthy_store(client):
    with patch("tareas_api.routes.health.get_store", side_effect=RuntimeError("down")):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.get_json()["components"]["store"] == "unhealthy"
