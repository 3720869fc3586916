from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.playground.types import NullTime
from app.playground.utils import int_field, str_field, time_field


@dataclass
class CustomerNote:
    id: int | None = None
    customer_number: int | None = None
    note: str = ""
    created_at: NullTime = field(default_factory=NullTime)

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "CustomerNote":
        return cls(
            id=int_field(payload, "id"),
            customer_number=int_field(payload, "customer_number"),
            note=str_field(payload, "note"),
            created_at=time_field(payload, "created_at"),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customer_number": self.customer_number,
            "note": self.note,
            "created_at": self.created_at.to_json(),
        }
