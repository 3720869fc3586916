"""Behaviour when the database is missing tables or unreachable."""
import pytest
from sqlalchemy.orm import sessionmaker

from app.playground.db import build_engine
from app.playground.models import Base


@pytest.fixture()
def dropped_tables(app):
    Base.metadata.drop_all(bind=app.extensions["sqlalchemy_engine"])


@pytest.fixture()
def unreachable_db(app, tmp_path):
    # parent directory does not exist, so every connect attempt fails
    engine = build_engine(f"sqlite:///{tmp_path/'missing'/'nowhere.db'}")
    app.extensions["sqlalchemy_sessionmaker"] = sessionmaker(bind=engine, expire_on_commit=False)
    yield
    engine.dispose()


def test_customer_read_storage_error_is_500(client, dropped_tables):
    r = client.get("/customer")
    assert r.status_code == 500
    assert r.json == {"message": "Failed to get customers"}

    r = client.get("/customer/4")
    assert r.status_code == 500
    assert r.json == {"message": "Failed to get customer number 4"}


def test_customer_delete_storage_error_is_500(client, dropped_tables):
    r = client.delete("/customer/4")
    assert r.status_code == 500
    assert r.json == {"message": "Failed Delete number 4"}


def test_customer_insert_storage_error_is_rejected(client, dropped_tables):
    r = client.post("/customer", json={"customer_number": 4, "name": "D", "email": "d@x.com"})
    assert r.status_code == 400
    assert r.json == {"message": "Failed to Insert Customer", "statuscode": 500}


def test_note_storage_errors_are_500(client, dropped_tables):
    r = client.get("/customer-note/get-all")
    assert r.status_code == 500
    assert r.json == {"message": "Failed to get customer notes"}

    r = client.get("/customer-note/get-by-id/2")
    assert r.status_code == 500
    assert r.json == {"message": "Failed to get customer note id 2"}

    r = client.delete("/customer-note/2")
    assert r.status_code == 500
    assert r.json == {"message": "Failed Delete id 2"}


def test_health_reports_unreachable_database(client, unreachable_db):
    r = client.get("/health")
    assert r.status_code == 503
    assert r.json == {"ok": False, "database": "error"}

    assert client.get("/healthz").status_code == 200
