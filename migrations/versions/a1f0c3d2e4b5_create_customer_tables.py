"""create customer and customer_note tables

Revision ID: a1f0c3d2e4b5
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = "a1f0c3d2e4b5"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    insp = inspect(bind)
    existing_tables = set(insp.get_table_names())

    def _has_index(table: str, name: str) -> bool:
        return any(ix.get("name") == name for ix in insp.get_indexes(table))

    if "customer" not in existing_tables:
        op.create_table(
            "customer",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
            sa.Column("customer_number", sa.BigInteger(), nullable=False),
            sa.Column("name", sa.Text(), nullable=False),
            sa.Column("email", sa.Text(), nullable=False),
            sa.Column("phone", sa.Text(), nullable=True),
            sa.Column("birth_date", sa.DateTime(timezone=False), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=False), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=False), nullable=True),
            sa.UniqueConstraint("customer_number", name="uq_customer_customer_number"),
        )
        existing_tables.add("customer")

    if "customer" in existing_tables:
        insp = inspect(op.get_bind())
        if not _has_index("customer", "idx_customer_name"):
            op.create_index("idx_customer_name", "customer", ["name"])

    if "customer_note" not in existing_tables:
        op.create_table(
            "customer_note",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
            sa.Column("customer_number", sa.BigInteger(), nullable=False),
            sa.Column("note", sa.Text(), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=False), nullable=True),
        )
        existing_tables.add("customer_note")

    if "customer_note" in existing_tables:
        insp = inspect(op.get_bind())
        if not _has_index("customer_note", "idx_customer_note_customer_number"):
            op.create_index("idx_customer_note_customer_number", "customer_note", ["customer_number"])


def downgrade() -> None:
    op.drop_index("idx_customer_note_customer_number", table_name="customer_note")
    op.drop_table("customer_note")

    op.drop_index("idx_customer_name", table_name="customer")
    op.drop_table("customer")
