"""Contract DTOs."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from invoice_api.models.domain.contract import ContractType, PayGrade


class ContractCreate(BaseModel):
    """DTO for creating a contract.

    Period ordering and rate bounds are business rules checked by the
    validation layer, not by field constraints, so that callers receive the
    domain error with its context.
    """

    employee_id: int
    start_date: date
    end_date: date
    daily_rate: Decimal = Field(max_digits=12, decimal_places=2)
    pay_grade: PayGrade
    contract_type: ContractType


class ContractUpdate(BaseModel):
    """DTO for updating a contract."""

    employee_id: int
    start_date: date
    end_date: date
    daily_rate: Decimal = Field(max_digits=12, decimal_places=2)
    pay_grade: PayGrade
    contract_type: ContractType


class ContractResponse(BaseModel):
    """Contract response DTO."""

    id: int
    employee_id: int
    employee_name: str | None = None
    start_date: date
    end_date: date
    daily_rate: Decimal
    pay_grade: PayGrade
    contract_type: ContractType
    display_name: str
