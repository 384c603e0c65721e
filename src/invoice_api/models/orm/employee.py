"""Employee ORM model."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoice_api.models.orm.base import Base, IntIdMixin, TimestampMixin


class EmployeeORM(Base, IntIdMixin, TimestampMixin):
    """Employee database model."""

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)
    department: Mapped[str] = mapped_column(String(100), nullable=False)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships - use lazy="select" for collections to avoid N+1 queries
    contracts: Mapped[list["ContractORM"]] = relationship(
        "ContractORM",
        back_populates="employee",
        lazy="select",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    invoices: Mapped[list["InvoiceORM"]] = relationship(
        "InvoiceORM",
        back_populates="employee",
        lazy="select",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_employees_email", "email"),
        Index("idx_employees_department", "department"),
    )

    @property
    def full_name(self) -> str:
        """Display name built from first and last name."""
        return f"{self.first_name} {self.last_name}"


# Import here to avoid circular import
from invoice_api.models.orm.contract import ContractORM  # noqa: E402, F401
from invoice_api.models.orm.invoice import InvoiceORM  # noqa: E402, F401
