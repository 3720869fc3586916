from __future__ import annotations

from collections.abc import Callable
from typing import Any

from flask import current_app, jsonify, request

from app.playground.result import Failure, FailureKind, Response, Result
from app.playground.utils import DecodeError

# Not-found keeps the historical 500; only client input and refused writes are 400.
_STATUS_BY_KIND = {
    FailureKind.INVALID: 400,
    FailureKind.NOT_FOUND: 500,
    FailureKind.STORAGE: 500,
    FailureKind.REJECTED: 400,
}


def failure_response(failure: Failure, op: str):
    current_app.logger.error("%s: %s (kind=%s)", op, failure.message, failure.kind.value)
    status = _STATUS_BY_KIND[failure.kind]
    if failure.kind is FailureKind.REJECTED:
        return jsonify(Response(failure.message, 500).to_dict()), status
    return jsonify({"message": failure.message}), status


def invalid_response(message: str, op: str):
    return failure_response(Failure.invalid(message), op)


def read_response(result: Result, op: str, encode: Callable[[Any], Any]):
    if not result.ok:
        return failure_response(result, op)
    return jsonify(encode(result.value)), 200


def write_response(result: Result, op: str):
    if not result.ok:
        return failure_response(result, op)
    return jsonify(Response(result.message, 200).to_dict()), 200


def decode_body(decode: Callable[[dict], Any], op: str) -> tuple[Any, Any]:
    """
    Decode the JSON request body with `decode`.
    Returns (entity, None) or (None, error response).
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return None, invalid_response("request body must be a JSON object", f"{op}/ParseBodyData")
    try:
        return decode(payload), None
    except DecodeError as e:
        return None, invalid_response(str(e), f"{op}/ParseBodyData")
