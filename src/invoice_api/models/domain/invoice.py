"""Invoice domain model."""

from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel


class InvoiceStatus(StrEnum):
    """Invoice status enum."""

    DRAFT = "Draft"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class Invoice(BaseModel):
    """Invoice domain model."""

    id: int | None = None
    invoice_number: str = ""
    employee_id: int
    contract_id: int
    start_date: date
    end_date: date
    days_worked: int
    total_amount: Decimal
    status: InvoiceStatus = InvoiceStatus.DRAFT
    created_at: datetime | None = None

    class Config:
        """Pydantic config."""

        from_attributes = True
