"""Add exclusion constraints against overlapping periods per employee.

Backs the in-process per-employee lock for writers in other processes.

Revision ID: 003
Revises: 002
Create Date: 2025-03-25

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS btree_gist")
    op.execute(
        """
        ALTER TABLE contracts ADD CONSTRAINT ex_contracts_employee_period
        EXCLUDE USING gist (employee_id WITH =, daterange(start_date, end_date, '[]') WITH &&)
        """
    )
    op.execute(
        """
        ALTER TABLE invoices ADD CONSTRAINT ex_invoices_employee_period
        EXCLUDE USING gist (employee_id WITH =, daterange(start_date, end_date, '[]') WITH &&)
        """
    )


def downgrade() -> None:
    op.execute("ALTER TABLE invoices DROP CONSTRAINT ex_invoices_employee_period")
    op.execute("ALTER TABLE contracts DROP CONSTRAINT ex_contracts_employee_period")
