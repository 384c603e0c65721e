"""Initial schema

Revision ID: 001
Revises:
Create Date: 2025-03-24 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Create employees table
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=False),
        sa.Column("department", sa.String(100), nullable=False),
        sa.Column("position", sa.String(100), nullable=False),
        sa.Column("salary", sa.Numeric(12, 2), nullable=False),
        sa.Column("hire_date", sa.Date(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("idx_employees_email", "employees", ["email"])
    op.create_index("idx_employees_department", "employees", ["department"])

    # Create contracts table
    op.create_table(
        "contracts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("daily_rate", sa.Numeric(12, 2), nullable=False),
        sa.Column("pay_grade", sa.String(50), nullable=False),
        sa.Column("contract_type", sa.String(50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.CheckConstraint("start_date < end_date", name="ck_contracts_period_order"),
        sa.CheckConstraint("daily_rate > 0", name="ck_contracts_daily_rate_positive"),
    )
    op.create_index(
        "idx_contracts_employee_period", "contracts", ["employee_id", "start_date", "end_date"]
    )

    # Create invoices table
    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("invoice_number", sa.String(32), nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("contract_id", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("days_worked", sa.Integer(), nullable=False),
        sa.Column("total_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("status", sa.String(20), server_default="Draft", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["contract_id"], ["contracts.id"]),
        sa.UniqueConstraint("invoice_number"),
        sa.CheckConstraint("start_date < end_date", name="ck_invoices_period_order"),
        sa.CheckConstraint("days_worked > 0", name="ck_invoices_days_worked_positive"),
    )
    op.create_index(
        "idx_invoices_employee_period", "invoices", ["employee_id", "start_date", "end_date"]
    )
    op.create_index("idx_invoices_contract", "invoices", ["contract_id"])
    op.create_index("idx_invoices_created_at", "invoices", ["created_at"])


def downgrade() -> None:
    op.drop_index("idx_invoices_created_at")
    op.drop_index("idx_invoices_contract")
    op.drop_index("idx_invoices_employee_period")
    op.drop_table("invoices")
    op.drop_index("idx_contracts_employee_period")
    op.drop_table("contracts")
    op.drop_index("idx_employees_department")
    op.drop_index("idx_employees_email")
    op.drop_table("employees")
