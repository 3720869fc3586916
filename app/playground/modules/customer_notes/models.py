from __future__ import annotations

from sqlalchemy import BigInteger, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.playground.models import Base
from app.playground.types import NullTime, NullTimeType


class CustomerNoteModel(Base):
    __tablename__ = "customer_note"
    __table_args__ = (
        Index("idx_customer_note_customer_number", "customer_number"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    note: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[NullTime] = mapped_column(NullTimeType(), nullable=True)
