from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.playground.db import db_session

bp = Blueprint("routes", __name__)


@bp.get("/")
def index():
    rules = sorted(
        f"{method} {rule.rule}"
        for rule in current_app.url_map.iter_rules()
        if rule.endpoint != "static"
        for method in sorted(rule.methods - {"HEAD", "OPTIONS"})
    )
    return {"service": "customer-playground", "routes": rules}


@bp.get("/health")
def health():
    """Health check endpoint. Returns JSON; 503 when the database is unreachable."""
    try:
        db_session().execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        current_app.logger.error("Health check DB ping failed: %s", e)
        return jsonify({"ok": False, "database": "error"}), 503
    return {"ok": True, "database": "ok"}


@bp.get("/healthz")
def healthz():
    """
    Fast health check for container probes. No DB access, minimal overhead.
    """
    return "ok", 200
