from __future__ import annotations

import logging
import sys
import uuid

from flask import Flask, g, has_request_context, request

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp every record with the current request id ("-" outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        rid = None
        if has_request_context():
            rid = getattr(g, "request_id", None)
        record.request_id = rid or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers:
        if getattr(h, "_playground", False):
            h.setLevel(level)
            return
    handler = logging.StreamHandler(sys.stdout)
    handler._playground = True  # type: ignore[attr-defined]
    handler.setLevel(level)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def init_request_logging(app: Flask) -> None:
    """Assign a request id per request and echo it back in X-Request-ID."""

    @app.before_request
    def _assign_request_id():
        g.request_id = (request.headers.get("X-Request-ID") or "").strip() or uuid.uuid4().hex

    @app.after_request
    def _echo_request_id(response):
        rid = getattr(g, "request_id", None)
        if rid:
            response.headers["X-Request-ID"] = rid
        app.logger.debug("%s %s -> %s", request.method, request.path, response.status_code)
        return response
