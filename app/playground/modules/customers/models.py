from __future__ import annotations

from sqlalchemy import BigInteger, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.playground.models import Base
from app.playground.types import NullTime, NullTimeType


class CustomerModel(Base):
    __tablename__ = "customer"
    __table_args__ = (
        Index("idx_customer_name", "name"),
    )

    # Surrogate key; only used to keep listing in insertion order.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_number: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)

    birth_date: Mapped[NullTime] = mapped_column(NullTimeType(), nullable=True)
    created_at: Mapped[NullTime] = mapped_column(NullTimeType(), nullable=True)
    updated_at: Mapped[NullTime] = mapped_column(NullTimeType(), nullable=True)
