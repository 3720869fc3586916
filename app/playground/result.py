"""
Outcome types passed between repository, service and handler.

Every repository and service method returns either Success or Failure.
A Failure always carries the reason; handlers translate it to exactly one
HTTP response.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, enum.Enum):
    INVALID = "invalid"  # bad body, path parameter or missing field
    NOT_FOUND = "not_found"
    REJECTED = "rejected"  # the store refused an insert/update
    STORAGE = "storage"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T | None = None
    message: str = ""

    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    error: BaseException | None = field(default=None, compare=False, repr=False)

    ok: ClassVar[bool] = False

    @classmethod
    def invalid(cls, message: str) -> "Failure":
        return cls(FailureKind.INVALID, message)

    @classmethod
    def not_found(cls, message: str) -> "Failure":
        return cls(FailureKind.NOT_FOUND, message)


Result = Union[Success[T], Failure]


@dataclass(frozen=True)
class Response:
    """Outcome record written to clients for insert/update/delete calls."""

    message: str
    status_code: int

    def to_dict(self) -> dict:
        return {"message": self.message, "statuscode": self.status_code}
