"""Invoice DTOs."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from invoice_api.constants.validation import MAX_DAYS_WORKED, MIN_DAYS_WORKED
from invoice_api.models.domain.contract import ContractType, PayGrade
from invoice_api.models.domain.invoice import InvoiceStatus


class InvoiceCreate(BaseModel):
    """DTO for creating an invoice."""

    employee_id: int
    contract_id: int
    start_date: date
    end_date: date
    days_worked: int = Field(ge=MIN_DAYS_WORKED, le=MAX_DAYS_WORKED)


class InvoiceUpdate(BaseModel):
    """DTO for updating an invoice.

    Employee and contract are fixed after creation; only the period, the
    claimed days and the status can change.
    """

    start_date: date
    end_date: date
    days_worked: int = Field(ge=MIN_DAYS_WORKED, le=MAX_DAYS_WORKED)
    status: InvoiceStatus


class InvoiceResponse(BaseModel):
    """Invoice response DTO."""

    id: int
    invoice_number: str
    employee_id: int
    employee_name: str
    contract_id: int
    contract_type: ContractType
    pay_grade: PayGrade
    daily_rate: Decimal
    start_date: date
    end_date: date
    days_worked: int
    total_amount: Decimal
    status: InvoiceStatus
    created_at: datetime
