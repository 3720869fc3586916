from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.playground.types import NullTime
from app.playground.utils import int_field, str_field, time_field


@dataclass
class Customer:
    customer_number: int | None = None
    name: str = ""
    email: str = ""
    phone: str = ""
    birth_date: NullTime = field(default_factory=NullTime)
    created_at: NullTime = field(default_factory=NullTime)
    updated_at: NullTime = field(default_factory=NullTime)

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "Customer":
        """Decode a request body. Raises DecodeError on a mistyped field."""
        return cls(
            customer_number=int_field(payload, "customer_number"),
            name=str_field(payload, "name"),
            email=str_field(payload, "email"),
            phone=str_field(payload, "phone"),
            birth_date=time_field(payload, "birth_date"),
            created_at=time_field(payload, "created_at"),
            updated_at=time_field(payload, "updated_at"),
        )

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "customer_number": self.customer_number,
            "name": self.name,
            "email": self.email,
        }
        if self.phone:
            out["phone"] = self.phone
        out["birth_date"] = self.birth_date.to_json()
        out["created_at"] = self.created_at.to_json()
        out["updated_at"] = self.updated_at.to_json()
        return out
