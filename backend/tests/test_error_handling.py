import logging

from fastapi import APIRouter
from fastapi.testclient import TestClient

from homestock.main import app
from homestock.models import ErrorLog


def test_validation_errors_are_400(client, alice):
    response = client.post("/api/products", headers=alice.headers, json={"name": "Rice", "quantity": "lots"})

    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Validation failed"
    assert isinstance(body["errors"], list) and body["errors"]


def test_not_found_body_shape(client, alice):
    response = client.get("/api/budgets/00000000-0000-0000-0000-000000000000", headers=alice.auth)

    assert response.status_code == 404
    assert response.json() == {"detail": "Budget not found"}


def test_unhandled_exception_is_logged_and_hidden(client, db, stored_errors, caplog):
    router = APIRouter()

    @router.get("/__boom")
    def boom():
        raise RuntimeError("database exploded with password=hunter2")

    app.include_router(router)
    try:
        with caplog.at_level(logging.CRITICAL, logger="error_logging"):
            response = TestClient(app, raise_server_exceptions=False).get("/__boom")
    finally:
        app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != "/__boom"]

    assert response.status_code == 500
    body = response.json()
    assert body["detail"] == "Internal server error"
    assert "exploded" not in body["detail"]

    log = db.query(ErrorLog).one()
    assert body["error_id"] == str(log.id)
    assert log.error_type == "RuntimeError"
    assert log.severity == "critical"
    assert log.request_path == "/__boom"
    assert log.context_data == {"unhandled": True}
    assert "RuntimeError: database exploded" in caplog.text


def test_health_and_root(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/").json()["docs"] == "/docs"
