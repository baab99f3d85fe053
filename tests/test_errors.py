"""Tests for error handlers."""


def test_unknown_route(client):
    response = client.get("/nada")
    assert response.status_code == 404
    assert response.get_json() == {"message": "Recurso no encontrado"}


def test_method_not_allowed(client):
    response = client.post("/tareas/1", json={})
    assert response.status_code == 405
    assert response.get_json() == {"message": "Método no permitido"}


def test_malformed_json(client):
    response = client.post("/tareas", data="{no json", content_type="application/json")
    assert response.status_code == 400
    assert "message" in response.get_json()


def test_unhandled_exception_returns_500(app, client):
    from tareas_api.services.store import STORE_EXTENSION_KEY

    class BrokenStore:
        def list_tasks(self):
            raise RuntimeError("boom")

    app.extensions[STORE_EXTENSION_KEY] = BrokenStore()

    response = client.get("/tareas")
    assert response.status_code == 500
    assert response.get_json() == {"message": "Error interno del servidor"}
