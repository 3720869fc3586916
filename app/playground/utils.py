from __future__ import annotations

import re
from typing import Any

from app.playground.types import NullTime, NullTimeParseError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


class DecodeError(ValueError):
    """A request body field has the wrong JSON type or format."""


def _in_range(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def parse_int_param(raw: str | None, name: str) -> tuple[int | None, str | None]:
    """Parse an integer path parameter (ASCII digits, optional sign, 64-bit)."""
    if not raw:
        return None, f"{name} is required"
    if not _INT_RE.fullmatch(raw):
        return None, f"{name} must be an integer, got {raw!r}"
    value = int(raw)
    if not _in_range(value):
        return None, f"{name} is out of range, got {raw!r}"
    return value, None


def int_field(payload: dict[str, Any], key: str) -> int | None:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{key} must be an integer")
    if not _in_range(value):
        raise DecodeError(f"{key} is out of range")
    return value


def str_field(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{key} must be a string")
    return value


def time_field(payload: dict[str, Any], key: str) -> NullTime:
    try:
        return NullTime.from_json(payload.get(key))
    except NullTimeParseError as e:
        raise DecodeError(f"{key}: {e}") from e
