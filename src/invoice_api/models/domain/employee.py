"""Employee domain model."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, EmailStr


class Employee(BaseModel):
    """Employee domain model."""

    id: int
    first_name: str
    last_name: str
    email: EmailStr
    phone_number: str
    department: str
    position: str
    salary: Decimal
    hire_date: date

    @property
    def full_name(self) -> str:
        """Display name built from first and last name."""
        return f"{self.first_name} {self.last_name}"

    class Config:
        """Pydantic config."""

        from_attributes = True
