"""Employee DTOs."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field

from invoice_api.constants.validation import (
    MAX_DEPARTMENT_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
    MAX_POSITION_LENGTH,
)


class EmployeeCreate(BaseModel):
    """DTO for creating an employee."""

    first_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    last_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr
    phone_number: str = Field(min_length=1, max_length=MAX_PHONE_LENGTH)
    department: str = Field(min_length=1, max_length=MAX_DEPARTMENT_LENGTH)
    position: str = Field(min_length=1, max_length=MAX_POSITION_LENGTH)
    salary: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    hire_date: date


class EmployeeUpdate(BaseModel):
    """DTO for updating an employee. Hire date is fixed once recorded."""

    first_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    last_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr
    phone_number: str = Field(min_length=1, max_length=MAX_PHONE_LENGTH)
    department: str = Field(min_length=1, max_length=MAX_DEPARTMENT_LENGTH)
    position: str = Field(min_length=1, max_length=MAX_POSITION_LENGTH)
    salary: Decimal = Field(ge=0, max_digits=12, decimal_places=2)


class EmployeeResponse(BaseModel):
    """Employee response DTO."""

    id: int
    first_name: str
    last_name: str
    full_name: str
    email: EmailStr
    phone_number: str
    department: str
    position: str
    salary: Decimal
    hire_date: date
