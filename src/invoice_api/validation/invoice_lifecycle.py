"""Invoice period, overlap, worked-day and amount rules."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from enum import StrEnum

from invoice_api.exceptions import (
    AmountMismatchError,
    DaysExceedActualError,
    DaysMismatchError,
    InvoiceOverlapError,
    OutOfContractError,
    PeriodOrderError,
)
from invoice_api.models.domain.contract import Contract
from invoice_api.models.domain.invoice import Invoice
from invoice_api.validation.periods import first_overlapping
from invoice_api.validation.working_days import WorkingDaysCalculator


class ValidationMode(StrEnum):
    """Whether an invoice is being created or edited."""

    CREATE = "create"
    UPDATE = "update"


class InvoiceLifecycleValidator:
    """Checks that must all pass before an invoice is stored.

    Create and update treat claimed days differently: a new invoice may bill
    fewer days than the period contains, an edited one must match exactly.
    """

    def __init__(self, calculator: WorkingDaysCalculator | None = None) -> None:
        self.calculator = calculator or WorkingDaysCalculator()

    def validate_period(self, start_date: date, end_date: date, contract: Contract) -> None:
        """Validate that the invoice period is ordered and inside the contract.

        Raises:
            PeriodOrderError: If start_date is not before end_date
            OutOfContractError: If the period leaves the contract period
        """
        if start_date >= end_date:
            raise PeriodOrderError(start_date, end_date, subject="Invoice")

        if start_date < contract.start_date or end_date > contract.end_date:
            raise OutOfContractError(
                start_date,
                end_date,
                contract.start_date,
                contract.end_date,
                contract_id=contract.id,
            )

    def validate_no_overlap(
        self,
        start_date: date,
        end_date: date,
        existing_invoices: Iterable[Invoice],
        exclude_invoice_id: int | None = None,
    ) -> None:
        """Validate that no other invoice of the employee covers any of the same days.

        Raises:
            InvoiceOverlapError: For the first conflicting invoice by id
        """
        conflict = first_overlapping(start_date, end_date, existing_invoices, exclude_invoice_id)
        if conflict is not None:
            raise InvoiceOverlapError(conflict.id, conflict.start_date, conflict.end_date)

    def compute_and_validate_days_worked(
        self,
        start_date: date,
        end_date: date,
        claimed_days: int,
        mode: ValidationMode,
    ) -> int:
        """Compare claimed days with the working days in the period.

        Returns:
            The computed number of working days

        Raises:
            InvalidRangeError: If the period contains no days
            DaysExceedActualError: On create, if claimed days exceed the computed days
            DaysMismatchError: On update, if claimed days differ from the computed days
        """
        computed = self.calculator.working_days(start_date, end_date)

        match mode:
            case ValidationMode.CREATE:
                if claimed_days > computed:
                    raise DaysExceedActualError(claimed_days, computed)
            case ValidationMode.UPDATE:
                if claimed_days != computed:
                    raise DaysMismatchError(claimed_days, computed)
            case _:
                raise ValueError(f"Unknown validation mode: {mode}")

        return computed

    def validate_total_amount(self, total_amount: Decimal, days_worked: int, daily_rate: Decimal) -> None:
        """Validate that the total is exactly days worked times daily rate.

        Raises:
            AmountMismatchError: If the amounts differ at all
        """
        expected = days_worked * Decimal(daily_rate)
        if Decimal(total_amount) != expected:
            raise AmountMismatchError(Decimal(total_amount), expected)
