# tests/test_errors.py

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from builder_server import crud
from builder_server.main import create_app


def broken_query(*args, **kwargs):
    raise OperationalError("SELECT", {}, Exception("disk I/O error"))


def test_store_failures_do_not_leak_details(client, monkeypatch):
    monkeypatch.setattr(crud, "get_build", broken_query)
    monkeypatch.setattr(crud, "list_recent_builds", broken_query)
    monkeypatch.setattr(crud, "create_build", broken_query)
    monkeypatch.setattr(crud, "get_user_by_username", broken_query)

    responses = [
        client.get("/api/load/abc"),
        client.get("/api/history/abc"),
        client.post("/api/save", json={"userId": "abc", "bricks": []}),
        client.post("/api/signup", json={"username": "alice", "password": "secret123"}),
        client.post("/api/login", json={"username": "alice", "password": "secret123"}),
    ]
    for resp in responses:
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "Server error", "error": "Server error"}
        assert "disk I/O" not in resp.text


def test_internal_detail_exposed_when_enabled(make_settings, monkeypatch):
    app = create_app(make_settings(expose_internal_errors=True))
    client = TestClient(app)
    monkeypatch.setattr(crud, "get_build", broken_query)

    resp = client.get("/api/load/abc")
    assert resp.status_code == 500
    assert resp.json()["message"] == "Server error"
    assert "disk I/O error" in resp.json()["error"]
    app.state.engine.dispose()


def test_cors_headers(client):
    resp = client.get("/api/history/abc", headers={"Origin": "http://localhost:5173"})
    assert resp.headers["access-control-allow-origin"] == "*"
