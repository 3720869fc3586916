from __future__ import annotations

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.playground.modules.customer_notes.models import CustomerNoteModel
from app.playground.modules.customer_notes.schemas import CustomerNote
from app.playground.result import Failure, FailureKind, Result, Success

logger = logging.getLogger(__name__)

_notes = CustomerNoteModel.__table__

_COLUMNS = (
    _notes.c.id,
    _notes.c.customer_number,
    _notes.c.note,
    _notes.c.created_at,
)


def _row_to_note(row) -> CustomerNote:
    return CustomerNote(
        id=row.id,
        customer_number=row.customer_number,
        note=row.note,
        created_at=row.created_at,
    )


class CustomerNoteRepository:
    def __init__(self, s: Session):
        self.s = s

    def _fetch_many(self, stmt, what: str) -> Result[list[CustomerNote]]:
        try:
            rows = self.s.execute(stmt).all()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("failed to fetch %s: %s", what, e)
            return Failure(FailureKind.STORAGE, f"Failed to get {what}", e)
        return Success([_row_to_note(r) for r in rows])

    def get_all(self) -> Result[list[CustomerNote]]:
        stmt = select(*_COLUMNS).order_by(_notes.c.id)
        return self._fetch_many(stmt, "customer notes")

    def get_by_customer_number(self, customer_number: int) -> Result[list[CustomerNote]]:
        stmt = (
            select(*_COLUMNS)
            .where(_notes.c.customer_number == customer_number)
            .order_by(_notes.c.id)
        )
        return self._fetch_many(stmt, f"customer notes for number {customer_number}")

    def get_by_id(self, note_id: int) -> Result[CustomerNote]:
        stmt = select(*_COLUMNS).where(_notes.c.id == note_id)
        try:
            row = self.s.execute(stmt).one_or_none()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("failed to fetch customer note %s: %s", note_id, e)
            return Failure(FailureKind.STORAGE, f"Failed to get customer note id {note_id}", e)
        if row is None:
            return Failure.not_found(f"No customer note found with id {note_id}")
        return Success(_row_to_note(row))

    def insert(self, note: CustomerNote) -> Result[None]:
        """Insert a note. The store assigns the id and it is written back onto `note`."""
        stmt = insert(_notes).values(
            customer_number=note.customer_number,
            note=note.note,
            created_at=note.created_at,
        )
        try:
            res = self.s.execute(stmt)
            new_id = res.inserted_primary_key[0]
            self.s.commit()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("failed to insert customer note: %s", e)
            return Failure(FailureKind.REJECTED, "Failed to Insert Customer Note", e)
        note.id = new_id
        return Success(message=f"Succes Insert Customer Note with id {note.id}")

    def update(self, note: CustomerNote) -> Result[None]:
        stmt = (
            update(_notes)
            .where(_notes.c.id == note.id)
            .values(customer_number=note.customer_number, note=note.note, created_at=note.created_at)
        )
        try:
            res = self.s.execute(stmt)
            self.s.commit()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("failed to update customer note %s: %s", note.id, e)
            return Failure(FailureKind.REJECTED, f"Failed Update id {note.id}", e)
        if res.rowcount == 0:
            return Failure.not_found(f"No customer note found with id {note.id}")
        return Success(message="Succes Update")

    def delete_by_id(self, note_id: int) -> Result[None]:
        stmt = delete(_notes).where(_notes.c.id == note_id)
        try:
            res = self.s.execute(stmt)
            self.s.commit()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("failed to delete customer note %s: %s", note_id, e)
            return Failure(FailureKind.STORAGE, f"Failed Delete id {note_id}", e)
        if res.rowcount == 0:
            return Failure.not_found(f"No customer note found with id {note_id}")
        return Success(message="Succes Delete!!")
