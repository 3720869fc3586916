from __future__ import annotations

from flask import Blueprint

from app.playground.db import db_session
from app.playground.modules.customer_notes.repository import CustomerNoteRepository
from app.playground.modules.customer_notes.schemas import CustomerNote
from app.playground.modules.customer_notes.service import CustomerNoteService
from app.playground.responses import decode_body, invalid_response, read_response, write_response
from app.playground.utils import parse_int_param

bp = Blueprint("customer_notes", __name__)


def _service() -> CustomerNoteService:
    return CustomerNoteService(CustomerNoteRepository(db_session()))


def _encode_many(notes: list[CustomerNote]) -> list[dict]:
    return [n.to_json() for n in notes]


@bp.get("/customer-note/get-all")
def customer_notes_get_all():
    return read_response(_service().get_all(), "customer_note.get_all", _encode_many)


@bp.get("/customer-note/get-by-customer-number/<customer_number>")
def customer_notes_get_by_customer_number(customer_number: str):
    number, err = parse_int_param(customer_number, "customer_number")
    if err:
        return invalid_response(err, "customer_note.get_by_customer_number")
    result = _service().get_by_customer_number(number)
    return read_response(result, "customer_note.get_by_customer_number", _encode_many)


@bp.get("/customer-note/get-by-id/<note_id>")
def customer_notes_get_by_id(note_id: str):
    nid, err = parse_int_param(note_id, "id")
    if err:
        return invalid_response(err, "customer_note.get_by_id")
    return read_response(_service().get_by_id(nid), "customer_note.get_by_id", CustomerNote.to_json)


@bp.post("/customer-note")
def customer_notes_insert():
    note, error = decode_body(CustomerNote.from_json, "customer_note.insert")
    if error:
        return error
    return write_response(_service().insert(note), "customer_note.insert")


@bp.put("/customer-note")
def customer_notes_update():
    note, error = decode_body(CustomerNote.from_json, "customer_note.update")
    if error:
        return error
    return write_response(_service().update(note), "customer_note.update")


@bp.delete("/customer-note/<note_id>")
def customer_notes_delete(note_id: str):
    nid, err = parse_int_param(note_id, "id")
    if err:
        return invalid_response(err, "customer_note.delete_by_id")
    return write_response(_service().delete_by_id(nid), "customer_note.delete_by_id")
