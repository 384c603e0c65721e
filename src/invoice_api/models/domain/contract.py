"""Contract domain model."""

from datetime import date
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel


class PayGrade(StrEnum):
    """Pay grade enum."""

    JUNIOR = "Junior"
    INTERMEDIATE = "Intermediate"
    SENIOR = "Senior"
    EXPERT = "Expert"


class ContractType(StrEnum):
    """Contract type enum."""

    FULL_TIME = "FullTime"
    PART_TIME = "PartTime"
    CONTRACT = "Contract"


class Contract(BaseModel):
    """Contract domain model.

    References its employee by id only; relationships are resolved by the
    service layer through repository lookups.
    """

    id: int | None = None
    employee_id: int
    start_date: date
    end_date: date
    daily_rate: Decimal
    pay_grade: PayGrade
    contract_type: ContractType

    @property
    def display_name(self) -> str:
        """Short label shown when picking a contract for an invoice."""
        return f"{self.contract_type} - {self.pay_grade} (${self.daily_rate}/day)"

    class Config:
        """Pydantic config."""

        from_attributes = True
