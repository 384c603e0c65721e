"""Contract ORM model."""

from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoice_api.models.orm.base import Base, IntIdMixin, TimestampMixin


class ContractORM(Base, IntIdMixin, TimestampMixin):
    """Contract database model."""

    __tablename__ = "contracts"

    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    daily_rate: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    pay_grade: Mapped[str] = mapped_column(String(50), nullable=False)
    contract_type: Mapped[str] = mapped_column(String(50), nullable=False)

    employee: Mapped["EmployeeORM"] = relationship("EmployeeORM", back_populates="contracts")
    invoices: Mapped[list["InvoiceORM"]] = relationship(
        "InvoiceORM",
        back_populates="contract",
        lazy="select",
    )

    __table_args__ = (
        CheckConstraint("start_date < end_date", name="ck_contracts_period_order"),
        CheckConstraint("daily_rate > 0", name="ck_contracts_daily_rate_positive"),
        Index("idx_contracts_employee_period", "employee_id", "start_date", "end_date"),
    )


from invoice_api.models.orm.employee import EmployeeORM  # noqa: E402, F401
from invoice_api.models.orm.invoice import InvoiceORM  # noqa: E402, F401
