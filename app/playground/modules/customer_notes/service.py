from __future__ import annotations

import logging

from app.playground.modules.customer_notes.repository import CustomerNoteRepository
from app.playground.modules.customer_notes.schemas import CustomerNote
from app.playground.result import Failure, Result
from app.playground.types import NullTime

logger = logging.getLogger(__name__)


def validate_customer_note_payload(note: CustomerNote) -> list[str]:
    """Validate a note for insertion. Returns list of errors."""
    errors = []
    if note.id is not None:
        errors.append("id is assigned by the store and must be omitted.")
    if note.customer_number is None:
        errors.append("customer_number is required.")
    if not note.note.strip():
        errors.append("note is required.")
    return errors


class CustomerNoteService:
    def __init__(self, repository: CustomerNoteRepository):
        self.repository = repository

    def _logged(self, op: str, result: Result) -> Result:
        if not result.ok:
            logger.error("customer_note.%s: %s", op, result.message)
        return result

    def get_all(self) -> Result[list[CustomerNote]]:
        return self._logged("get_all", self.repository.get_all())

    def get_by_customer_number(self, customer_number: int) -> Result[list[CustomerNote]]:
        return self._logged("get_by_customer_number", self.repository.get_by_customer_number(customer_number))

    def get_by_id(self, note_id: int) -> Result[CustomerNote]:
        return self._logged("get_by_id", self.repository.get_by_id(note_id))

    def insert(self, note: CustomerNote) -> Result[None]:
        errors = validate_customer_note_payload(note)
        if errors:
            return Failure.invalid(" ".join(errors))
        if not note.created_at.valid:
            note.created_at = NullTime.now()
        return self._logged("insert", self.repository.insert(note))

    def update(self, new_note: CustomerNote) -> Result[None]:
        """
        Merge the incoming note over the stored note with the same id.

        A missing customer_number or blank note keeps the stored value;
        created_at is never taken from the input. Read-then-write is not
        atomic: a concurrent update between the two statements is lost.
        """
        if new_note.id is None:
            return Failure.invalid("id is required.")

        current = self.repository.get_by_id(new_note.id)
        if not current.ok:
            return self._logged("update", current)
        stored: CustomerNote = current.value

        if new_note.customer_number is None:
            new_note.customer_number = stored.customer_number
        if not new_note.note:
            new_note.note = stored.note
        new_note.created_at = stored.created_at

        return self._logged("update", self.repository.update(new_note))

    def delete_by_id(self, note_id: int) -> Result[None]:
        return self._logged("delete_by_id", self.repository.delete_by_id(note_id))
