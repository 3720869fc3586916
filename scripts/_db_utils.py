from __future__ import annotations

from contextlib import contextmanager

from sqlalchemy.orm import Session, sessionmaker

from app.playground.db import build_engine
from app.playground.models import Base, import_all_models


def create_script_engine(db_url: str):
    """Small pool; scripts hold one connection at a time."""
    return build_engine(db_url, pool_size=1, max_overflow=0)


def create_tables(db_url: str) -> list[str]:
    """Create any missing customer tables. Returns the table names now present."""
    import_all_models()
    engine = create_script_engine(db_url)
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()
    return sorted(Base.metadata.tables)


@contextmanager
def script_session(db_url: str):
    """One-off session for scripts; the engine is disposed on exit."""
    engine = create_script_engine(db_url)
    sm = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    s: Session = sm()
    try:
        yield s
        s.commit()
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()
        engine.dispose()
