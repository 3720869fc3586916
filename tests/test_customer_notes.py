"""HTTP tests for the customer-note endpoints."""
from datetime import datetime, timezone

from app.playground.types import parse_rfc3339


def _note(client, **fields):
    payload = {"customer_number": 1, "note": "Called about invoice."}
    payload.update(fields)
    return client.post("/customer-note", json=payload)


def test_insert_without_id_uses_generated_id(client):
    before = datetime.now(timezone.utc)
    r = _note(client)
    after = datetime.now(timezone.utc)
    assert r.status_code == 200
    assert r.json == {"message": "Succes Insert Customer Note with id 1", "statuscode": 200}

    body = client.get("/customer-note/get-by-id/1").json
    assert body["customer_number"] == 1
    assert body["note"] == "Called about invoice."
    assert before <= parse_rfc3339(body["created_at"]) <= after

    r = _note(client, note="Second")
    assert r.json["message"] == "Succes Insert Customer Note with id 2"


def test_insert_rejects_caller_supplied_id(client):
    r = _note(client, id=10)
    assert r.status_code == 400
    assert r.json == {"message": "id is assigned by the store and must be omitted."}
    assert client.get("/customer-note/get-all").json == []

    r = _note(client)
    assert r.json["message"] == "Succes Insert Customer Note with id 1"


def test_insert_requires_customer_number_and_note(client):
    r = client.post("/customer-note", json={"note": "   "})
    assert r.status_code == 400
    assert r.json == {"message": "customer_number is required. note is required."}


def test_get_all_and_by_customer_number(client):
    assert client.get("/customer-note/get-all").json == []

    _note(client, customer_number=1, note="a")
    _note(client, customer_number=2, note="b")
    _note(client, customer_number=1, note="c")

    r = client.get("/customer-note/get-all")
    assert r.status_code == 200
    assert [n["note"] for n in r.json] == ["a", "b", "c"]

    r = client.get("/customer-note/get-by-customer-number/1")
    assert r.status_code == 200
    assert [n["note"] for n in r.json] == ["a", "c"]

    r = client.get("/customer-note/get-by-customer-number/3")
    assert r.status_code == 200
    assert r.json == []


def test_bad_path_parameters_are_400(client):
    assert client.get("/customer-note/get-by-id/x").status_code == 400
    assert client.get("/customer-note/get-by-customer-number/x").status_code == 400
    assert client.delete("/customer-note/x").status_code == 400
    assert client.delete("/customer-note/99999999999999999999").status_code == 400
    assert client.get("/customer-note/get-by-id/1_0").status_code == 400


def test_get_missing_note_is_500(client):
    r = client.get("/customer-note/get-by-id/5")
    assert r.status_code == 500
    assert r.json == {"message": "No customer note found with id 5"}


def test_update_merges_by_note_id(client):
    _note(client, customer_number=7, created_at="2020-05-01T08:00:00Z")

    r = client.put("/customer-note", json={"id": 1, "note": "Edited", "created_at": "1999-01-01T00:00:00Z"})
    assert r.status_code == 200
    assert r.json == {"message": "Succes Update", "statuscode": 200}

    body = client.get("/customer-note/get-by-id/1").json
    assert body == {
        "id": 1,
        "customer_number": 7,
        "note": "Edited",
        "created_at": "2020-05-01T08:00:00Z",
    }


def test_update_can_move_note_to_other_customer(client):
    _note(client, customer_number=7)
    r = client.put("/customer-note", json={"id": 1, "customer_number": 8})
    assert r.status_code == 200

    body = client.get("/customer-note/get-by-id/1").json
    assert body["customer_number"] == 8
    assert body["note"] == "Called about invoice."


def test_update_missing_note(client):
    r = client.put("/customer-note", json={"id": 3, "note": "x"})
    assert r.status_code == 500
    assert r.json == {"message": "No customer note found with id 3"}


def test_update_requires_id(client):
    r = client.put("/customer-note", json={"customer_number": 1, "note": "x"})
    assert r.status_code == 400
    assert r.json == {"message": "id is required."}


def test_delete(client):
    _note(client)
    r = client.delete("/customer-note/1")
    assert r.status_code == 200
    assert r.json == {"message": "Succes Delete!!", "statuscode": 200}

    r = client.delete("/customer-note/1")
    assert r.status_code == 500
    assert r.json == {"message": "No customer note found with id 1"}
