"""Invoice ORM model."""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoice_api.models.orm.base import Base, IntIdMixin


class InvoiceORM(Base, IntIdMixin):
    """Invoice database model."""

    __tablename__ = "invoices"

    invoice_number: Mapped[str] = mapped_column(String(32), unique=True, nullable=False)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    # NO ACTION: a contract with invoices cannot be deleted on its own, but an
    # employee delete cascading to both in one statement succeeds
    contract_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("contracts.id"), nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    days_worked: Mapped[int] = mapped_column(Integer, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Draft")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    employee: Mapped["EmployeeORM"] = relationship("EmployeeORM", back_populates="invoices")
    contract: Mapped["ContractORM"] = relationship("ContractORM", back_populates="invoices")

    __table_args__ = (
        CheckConstraint("start_date < end_date", name="ck_invoices_period_order"),
        CheckConstraint("days_worked > 0", name="ck_invoices_days_worked_positive"),
        Index("idx_invoices_employee_period", "employee_id", "start_date", "end_date"),
        Index("idx_invoices_contract", "contract_id"),
        Index("idx_invoices_created_at", "created_at"),
    )


from invoice_api.models.orm.contract import ContractORM  # noqa: E402, F401
from invoice_api.models.orm.employee import EmployeeORM  # noqa: E402, F401
