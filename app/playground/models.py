from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def import_all_models() -> None:
    """Register every module's tables on Base.metadata."""
    from app.playground.modules.customers import models as _customers  # noqa: F401
    from app.playground.modules.customer_notes import models as _customer_notes  # noqa: F401
