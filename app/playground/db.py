from __future__ import annotations

import os
from collections.abc import Generator
from contextlib import contextmanager

from flask import Flask, current_app, g
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker


def build_engine(db_url: str, pool_size: int = 5, max_overflow: int = 10, pool_recycle: int = 1800) -> Engine:
    """Engine for the customer store. Pool sizing only applies to server databases."""
    if db_url.startswith("sqlite"):
        return create_engine(db_url, pool_pre_ping=True)
    return create_engine(
        db_url,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_recycle=pool_recycle,
    )


def init_db(app: Flask) -> None:
    engine = build_engine(
        app.config["DATABASE_URL"],
        pool_size=app.config["DB_POOL_SIZE"],
        max_overflow=app.config["DB_MAX_OVERFLOW"],
        pool_recycle=app.config["DB_POOL_RECYCLE_SECONDS"],
    )
    app.extensions["sqlalchemy_engine"] = engine
    app.extensions["sqlalchemy_sessionmaker"] = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # gunicorn forks workers after create_app(); pooled connections must not cross the fork.
    if hasattr(os, "register_at_fork"):
        os.register_at_fork(after_in_child=lambda: engine.dispose(close=False))


def db_session() -> Session:
    """
    Request-scoped session. Every repository call made while handling a
    request goes through this one session.
    """
    s: Session | None = g.get("db_session")
    if s is None:
        s = current_app.extensions["sqlalchemy_sessionmaker"]()
        g.db_session = s
    return s


def teardown_db_session(_exc: BaseException | None) -> None:
    s: Session | None = g.pop("db_session", None)
    if s is not None:
        s.close()


@contextmanager
def session_scope(app: Flask) -> Generator[Session, None, None]:
    """Session outside a request, for scripts and tests. Commits on success."""
    s: Session = app.extensions["sqlalchemy_sessionmaker"]()
    try:
        yield s
        s.commit()
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()
