"""Domain-specific exceptions for the invoice API.

These exceptions provide a clean separation between business-rule failures
and whatever transport the calling layer uses. Every exception carries a
human-readable message and a ``details`` dict with the offending values, so
callers can render a message without string matching.
"""

from datetime import date
from decimal import Decimal
from typing import Any


class InvoiceAPIError(Exception):
    """Base exception for all invoice API errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


def _period(start_date: date, end_date: date) -> dict[str, str]:
    return {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()}


# =============================================================================
# Resource Not Found Errors
# =============================================================================


class NotFoundError(InvoiceAPIError):
    """Base class for resource not found errors."""

    pass


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: int | None = None) -> None:
        details = {"employee_id": employee_id} if employee_id is not None else {}
        super().__init__("Employee not found", details)


class ContractNotFoundError(NotFoundError):
    """Raised when a contract cannot be found or belongs to another employee."""

    def __init__(self, contract_id: int | None = None, employee_id: int | None = None) -> None:
        details: dict[str, Any] = {}
        if contract_id is not None:
            details["contract_id"] = contract_id
        if employee_id is not None:
            details["employee_id"] = employee_id
        super().__init__("Contract not found", details)


class InvoiceNotFoundError(NotFoundError):
    """Raised when an invoice cannot be found."""

    def __init__(self, invoice_id: int | None = None) -> None:
        details = {"invoice_id": invoice_id} if invoice_id is not None else {}
        super().__init__("Invoice not found", details)


# =============================================================================
# Conflict Errors
# =============================================================================


class ConflictError(InvoiceAPIError):
    """Base class for resource conflict errors."""

    pass


class ContractInUseError(ConflictError):
    """Raised when deleting a contract that invoices still bill against."""

    def __init__(self, contract_id: int, invoice_count: int) -> None:
        super().__init__(
            "Cannot delete a contract that has invoices",
            {"contract_id": contract_id, "invoice_count": invoice_count},
        )


class ContractReassignError(ConflictError):
    """Raised when moving a contract with invoices to another employee."""

    def __init__(self, contract_id: int, employee_id: int, invoice_count: int) -> None:
        super().__init__(
            "Cannot move a contract that has invoices to another employee",
            {"contract_id": contract_id, "employee_id": employee_id, "invoice_count": invoice_count},
        )


class EmployeeEmailExistsError(ConflictError):
    """Raised when an email address already belongs to another employee."""

    def __init__(self, email: str) -> None:
        super().__init__("An employee with this email already exists", {"email": email})


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(InvoiceAPIError):
    """Base class for business-rule validation errors."""

    pass


class ContractError(ValidationError):
    """Base class for contract validation errors."""

    pass


class InvoiceError(ValidationError):
    """Base class for invoice validation errors."""

    pass


class DateRangeError(ValidationError):
    """Base class for date range errors."""

    pass


class PeriodOrderError(ContractError, InvoiceError):
    """Raised when a period does not start strictly before it ends."""

    def __init__(self, start_date: date, end_date: date, subject: str = "Period") -> None:
        super().__init__(
            f"{subject} start date must be before end date",
            {"subject": subject.lower(), **_period(start_date, end_date)},
        )


class PastStartError(ContractError):
    """Raised when a contract starts before the reference date."""

    def __init__(self, start_date: date, today: date) -> None:
        super().__init__(
            "Contract start date cannot be in the past",
            {"start_date": start_date.isoformat(), "today": today.isoformat()},
        )


class ContractOverlapError(ContractError):
    """Raised when a contract period overlaps another contract of the same employee."""

    def __init__(self, conflicting_id: int | None, conflicting_start: date, conflicting_end: date) -> None:
        super().__init__(
            "Contract period overlaps with existing contract "
            f"({conflicting_start.isoformat()} - {conflicting_end.isoformat()})",
            {
                "conflicting_contract_id": conflicting_id,
                "conflicting_start_date": conflicting_start.isoformat(),
                "conflicting_end_date": conflicting_end.isoformat(),
            },
        )


class RateTooLowError(ContractError):
    """Raised when a daily rate is zero or negative."""

    def __init__(self, rate: Decimal) -> None:
        super().__init__("Daily rate must be greater than zero", {"daily_rate": str(rate)})


class RateTooHighError(ContractError):
    """Raised when a daily rate exceeds the configured ceiling."""

    def __init__(self, rate: Decimal, maximum: Decimal) -> None:
        super().__init__(
            "Daily rate exceeds maximum allowed value",
            {"daily_rate": str(rate), "max_daily_rate": str(maximum)},
        )


class OutOfContractError(InvoiceError):
    """Raised when an invoice period is not inside its contract period."""

    def __init__(
        self,
        start_date: date,
        end_date: date,
        contract_start: date,
        contract_end: date,
        contract_id: int | None = None,
    ) -> None:
        super().__init__(
            f"Invoice period ({start_date.isoformat()} - {end_date.isoformat()}) must be within "
            f"contract period ({contract_start.isoformat()} - {contract_end.isoformat()})",
            {
                **_period(start_date, end_date),
                "contract_id": contract_id,
                "contract_start_date": contract_start.isoformat(),
                "contract_end_date": contract_end.isoformat(),
            },
        )


class InvoiceOverlapError(InvoiceError):
    """Raised when an invoice period overlaps another invoice of the same employee."""

    def __init__(self, conflicting_id: int | None, conflicting_start: date, conflicting_end: date) -> None:
        super().__init__(
            "Invoice period overlaps with existing invoice "
            f"({conflicting_start.isoformat()} - {conflicting_end.isoformat()})",
            {
                "conflicting_invoice_id": conflicting_id,
                "conflicting_start_date": conflicting_start.isoformat(),
                "conflicting_end_date": conflicting_end.isoformat(),
            },
        )


class DaysExceedActualError(InvoiceError):
    """Raised on create when claimed days exceed the working days in the period."""

    def __init__(self, claimed_days: int, working_days: int) -> None:
        super().__init__(
            f"Days worked ({claimed_days}) cannot exceed actual working days ({working_days})",
            {"days_worked": claimed_days, "working_days": working_days},
        )


class DaysMismatchError(InvoiceError):
    """Raised on update when claimed days differ from the working days in the period."""

    def __init__(self, claimed_days: int, working_days: int) -> None:
        super().__init__(
            f"Days worked ({claimed_days}) does not match actual working days ({working_days})",
            {"days_worked": claimed_days, "working_days": working_days},
        )


class AmountMismatchError(InvoiceError):
    """Raised when a total amount is not exactly days worked times daily rate."""

    def __init__(self, total_amount: Decimal, expected_amount: Decimal) -> None:
        super().__init__(
            f"Total amount ({total_amount}) does not match expected amount ({expected_amount})",
            {"total_amount": str(total_amount), "expected_amount": str(expected_amount)},
        )


class InvalidRangeError(DateRangeError):
    """Raised when a date range contains no days."""

    def __init__(self, start_date: date, end_date: date) -> None:
        super().__init__(
            "Invalid date range for days worked calculation",
            _period(start_date, end_date),
        )


# =============================================================================
# Status Policy Errors
# =============================================================================


class StatusPolicyError(InvoiceAPIError):
    """Base class for operations the invoice status does not permit."""

    pass


class InvoiceNotEditableError(StatusPolicyError):
    """Raised when editing an invoice outside Draft or Rejected status."""

    def __init__(self, invoice_id: int | None, status: str) -> None:
        super().__init__(
            "Can only edit invoices in Draft or Rejected status",
            {"invoice_id": invoice_id, "status": str(status)},
        )


class InvoiceNotDeletableError(StatusPolicyError):
    """Raised when deleting an invoice outside Draft status."""

    def __init__(self, invoice_id: int | None, status: str) -> None:
        super().__init__(
            "Can only delete invoices in Draft status",
            {"invoice_id": invoice_id, "status": str(status)},
        )
