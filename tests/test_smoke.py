import logging

import pytest

from app.playground import create_app


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json == {"ok": True, "database": "ok"}


def test_healthz_ok(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.data == b"ok"


def test_index_lists_routes(client):
    r = client.get("/")
    assert r.status_code == 200
    routes = r.json["routes"]
    assert "POST /customer" in routes
    assert "DELETE /customer-note/<note_id>" in routes


def test_unknown_route_returns_json_404(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert "message" in r.json


def test_wrong_method_returns_json_405(client):
    r = client.patch("/customer")
    assert r.status_code == 405
    assert "message" in r.json


def test_request_id_is_echoed(client):
    r = client.get("/healthz", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"

    r = client.get("/healthz")
    assert len(r.headers["X-Request-ID"]) == 32


def test_production_refuses_sqlite(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "a-real-secret")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'prod.db'}")
    with pytest.raises(RuntimeError, match="Postgres"):
        create_app()


def test_requests_are_logged_at_debug(client, caplog):
    caplog.set_level(logging.DEBUG, logger="app.playground")
    client.get("/healthz")
    assert any(rec.getMessage() == "GET /healthz -> 200" for rec in caplog.records)
