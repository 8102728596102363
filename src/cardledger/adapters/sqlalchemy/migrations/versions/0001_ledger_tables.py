"""Create the card_count and applied_list tables.

Revision ID: 0001_ledger_tables
Revises:
Create Date: 2026-10-19 00:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_ledger_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "card_count",
        sa.Column("catalog_id", sa.String(), nullable=False),
        sa.Column("variant", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("catalog_id", "variant", name=op.f("pk_card_count")),
    )
    op.create_table(
        "applied_list",
        sa.Column("fingerprint", sa.LargeBinary(), nullable=False),
        sa.PrimaryKeyConstraint("fingerprint", name=op.f("pk_applied_list")),
    )


def downgrade() -> None:
    op.drop_table("applied_list")
    op.drop_table("card_count")
