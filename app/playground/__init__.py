import logging

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from app.playground.config import load_config
from app.playground.db import init_db, teardown_db_session
from app.playground.log import configure_logging, init_request_logging
from app.playground.models import import_all_models
from app.playground.routes import bp as routes_bp
from app.playground.modules.customers.routes import bp as customers_bp
from app.playground.modules.customer_notes.routes import bp as customer_notes_bp


def create_app() -> Flask:
    load_dotenv()
    config = load_config()
    configure_logging(config["LOG_LEVEL"])

    app = Flask(__name__)
    app.config.from_mapping(config)
    app.json.sort_keys = False

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if str(app.config["DATABASE_URL"]).startswith("sqlite"):
            raise RuntimeError("DATABASE_URL must be Postgres in production (not sqlite).")
        if not app.config.get("SECRET_KEY") or str(app.config["SECRET_KEY"]) in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")

    import_all_models()
    init_db(app)

    init_request_logging(app)
    app.register_blueprint(routes_bp)
    app.register_blueprint(customers_bp)
    app.register_blueprint(customer_notes_bp)
    app.teardown_appcontext(teardown_db_session)

    @app.errorhandler(HTTPException)
    def _err_http(e: HTTPException):  # type: ignore[no-redef]
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def _err_500(e: Exception):  # type: ignore[no-redef]
        app.logger.exception("Unhandled exception: %s", e)
        return jsonify({"message": "internal server error"}), 500

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
