"""
Nullable timestamp shared by every entity.

NullTime is "a point in time, or explicitly absent". It crosses three
boundaries, each with its own null representation:

- storage driver: NULL <-> not valid (see NullTimeType)
- JSON: null / "" <-> not valid, otherwise an RFC3339 string
- Python: NullTime(valid=False) / NullTime(valid=True, time=<aware datetime>)

Valid values are always timezone-aware. Storage keeps naive UTC, so a value
read back from the database compares equal to the value written.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


class NullTimeParseError(ValueError):
    """Raised when a JSON value cannot be read as an RFC3339 timestamp."""


@dataclass(frozen=True)
class NullTime:
    time: datetime | None = None
    valid: bool = False

    def __post_init__(self) -> None:
        if self.valid and self.time is None:
            raise ValueError("a valid NullTime needs a time")
        if self.valid and self.time.tzinfo is None:
            # Naive datetimes are UTC throughout the service.
            object.__setattr__(self, "time", self.time.replace(tzinfo=timezone.utc))
        if not self.valid and self.time is not None:
            object.__setattr__(self, "time", None)

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def of(cls, t: datetime) -> "NullTime":
        return cls(time=t, valid=True)

    @classmethod
    def null(cls) -> "NullTime":
        return cls()

    @classmethod
    def now(cls) -> "NullTime":
        return cls(time=datetime.now(timezone.utc), valid=True)

    # storage driver boundary

    @classmethod
    def scan(cls, value: Any) -> "NullTime":
        if value is None:
            return cls()
        if not isinstance(value, datetime):
            raise TypeError(f"cannot scan {type(value).__name__} into NullTime")
        return cls(time=value, valid=True)

    def value(self) -> datetime | None:
        if not self.valid:
            return None
        return self.time.astimezone(timezone.utc).replace(tzinfo=None)

    # JSON boundary

    @classmethod
    def from_json(cls, raw: Any) -> "NullTime":
        if raw is None:
            return cls()
        if not isinstance(raw, str):
            raise NullTimeParseError(f"timestamp must be an RFC3339 string or null, got {type(raw).__name__}")
        text = raw.strip()
        if text == "" or text == "null":
            return cls()
        return cls(time=parse_rfc3339(text), valid=True)

    def to_json(self) -> str | None:
        if not self.valid:
            return None
        return format_rfc3339(self.time)


def parse_rfc3339(text: str) -> datetime:
    candidate = text
    if candidate[-1:] in ("Z", "z"):
        candidate = candidate[:-1] + "+00:00"
    if len(candidate) < 20 or candidate[10] not in ("T", "t"):
        raise NullTimeParseError(f"invalid RFC3339 timestamp: {text!r}")
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        raise NullTimeParseError(f"invalid RFC3339 timestamp: {text!r}") from None
    if parsed.tzinfo is None:
        raise NullTimeParseError(f"RFC3339 timestamp needs a UTC offset: {text!r}")
    return parsed


def format_rfc3339(t: datetime) -> str:
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    timespec = "microseconds" if t.microsecond else "seconds"
    out = t.isoformat(timespec=timespec)
    if out.endswith("+00:00"):
        out = out[:-6] + "Z"
    return out


class NullTimeType(TypeDecorator):
    """Column type that binds and loads NullTime values."""

    impl = DateTime(timezone=False)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> datetime | None:
        if value is None:
            return None
        if isinstance(value, NullTime):
            return value.value()
        if isinstance(value, datetime):
            return NullTime.of(value).value()
        raise TypeError(f"cannot bind {type(value).__name__} as NullTime")

    def process_result_value(self, value: Any, dialect) -> NullTime:
        return NullTime.scan(value)
