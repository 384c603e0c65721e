"""Add per-day invoice number counter.

Revision ID: 002
Revises: 001
Create Date: 2025-03-25

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "invoice_number_sequences",
        sa.Column("sequence_date", sa.Date(), nullable=False),
        sa.Column("last_value", sa.Integer(), server_default="0", nullable=False),
        sa.PrimaryKeyConstraint("sequence_date"),
    )

    # Seed counters from invoices numbered before the table existed
    op.execute(
        """
        INSERT INTO invoice_number_sequences (sequence_date, last_value)
        SELECT (created_at AT TIME ZONE 'UTC')::date, COUNT(*)
        FROM invoices
        GROUP BY (created_at AT TIME ZONE 'UTC')::date
        """
    )


def downgrade() -> None:
    op.drop_table("invoice_number_sequences")
