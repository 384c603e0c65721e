"""Tests for invoice period, overlap, worked-day and amount rules."""

from datetime import date
from decimal import Decimal

import pytest

from invoice_api.exceptions import (
    AmountMismatchError,
    DaysExceedActualError,
    DaysMismatchError,
    InvalidRangeError,
    InvoiceError,
    InvoiceOverlapError,
    OutOfContractError,
    PeriodOrderError,
)
from invoice_api.validation.invoice_lifecycle import InvoiceLifecycleValidator, ValidationMode

from factories import make_invoice

# Monday 2024-06-03 to Friday 2024-06-14 holds 10 working days
TWO_WEEKS = (date(2024, 6, 3), date(2024, 6, 14))


@pytest.fixture
def validator() -> InvoiceLifecycleValidator:
    return InvoiceLifecycleValidator()


class TestValidatePeriod:
    """Tests for the invoice period checks."""

    def test_inside_contract(self, validator, contract):
        """A period inside the contract passes."""
        validator.validate_period(*TWO_WEEKS, contract)

    def test_matching_contract_bounds(self, validator, contract):
        """A period equal to the contract period passes."""
        validator.validate_period(contract.start_date, contract.end_date, contract)

    def test_start_must_precede_end(self, validator, contract):
        """An invoice needs a start strictly before its end."""
        with pytest.raises(PeriodOrderError) as exc_info:
            validator.validate_period(date(2024, 6, 3), date(2024, 6, 3), contract)
        assert exc_info.value.message == "Invoice start date must be before end date"

    @pytest.mark.parametrize(
        "start,end",
        [
            (date(2023, 12, 31), date(2024, 1, 10)),
            (date(2024, 12, 20), date(2025, 1, 3)),
            (date(2023, 12, 1), date(2025, 1, 31)),
        ],
    )
    def test_outside_contract(self, validator, contract, start, end):
        """A period leaving the contract on either side is rejected."""
        with pytest.raises(OutOfContractError) as exc_info:
            validator.validate_period(start, end, contract)
        assert "contract period (2024-01-01 - 2024-12-31)" in exc_info.value.message


class TestValidateNoOverlap:
    """Tests for the invoice overlap check."""

    def test_no_existing_invoices(self, validator):
        validator.validate_no_overlap(*TWO_WEEKS, [])

    def test_overlap_rejected(self, validator):
        """Sharing a single day with another invoice is rejected."""
        existing = [make_invoice(id=3, start_date=date(2024, 6, 14), end_date=date(2024, 6, 21))]

        with pytest.raises(InvoiceOverlapError) as exc_info:
            validator.validate_no_overlap(*TWO_WEEKS, existing)

        assert exc_info.value.details["conflicting_invoice_id"] == 3
        assert "(2024-06-14 - 2024-06-21)" in exc_info.value.message

    def test_edited_invoice_excluded(self, validator):
        """An invoice never overlaps its own previous period."""
        existing = [make_invoice(id=3, start_date=date(2024, 6, 3), end_date=date(2024, 6, 7))]
        validator.validate_no_overlap(*TWO_WEEKS, existing, exclude_invoice_id=3)

    def test_adjacent_invoice_allowed(self, validator):
        existing = [make_invoice(id=3, start_date=date(2024, 6, 15), end_date=date(2024, 6, 30))]
        validator.validate_no_overlap(*TWO_WEEKS, existing)


class TestComputeAndValidateDaysWorked:
    """Tests for the claimed days check."""

    def test_create_allows_fewer_days(self, validator):
        """A new invoice may bill fewer days than the period holds."""
        assert validator.compute_and_validate_days_worked(*TWO_WEEKS, 9, ValidationMode.CREATE) == 10

    def test_create_allows_exact_days(self, validator):
        assert validator.compute_and_validate_days_worked(*TWO_WEEKS, 10, ValidationMode.CREATE) == 10

    def test_create_rejects_excess_days(self, validator):
        with pytest.raises(DaysExceedActualError) as exc_info:
            validator.compute_and_validate_days_worked(*TWO_WEEKS, 11, ValidationMode.CREATE)
        assert exc_info.value.message == "Days worked (11) cannot exceed actual working days (10)"

    def test_update_requires_exact_days(self, validator):
        """An edited invoice must bill exactly the working days in the period."""
        with pytest.raises(DaysMismatchError) as exc_info:
            validator.compute_and_validate_days_worked(*TWO_WEEKS, 9, ValidationMode.UPDATE)
        assert exc_info.value.details == {"days_worked": 9, "working_days": 10}

    def test_update_accepts_exact_days(self, validator):
        assert validator.compute_and_validate_days_worked(*TWO_WEEKS, 10, ValidationMode.UPDATE) == 10

    def test_invalid_range(self, validator):
        with pytest.raises(InvalidRangeError):
            validator.compute_and_validate_days_worked(
                date(2024, 6, 14), date(2024, 6, 3), 1, ValidationMode.CREATE
            )


class TestValidateTotalAmount:
    """Tests for the total amount check."""

    def test_exact_total(self, validator):
        validator.validate_total_amount(Decimal("2000"), 20, Decimal("100"))

    def test_integer_arguments(self, validator):
        validator.validate_total_amount(2000, 20, 100)

    def test_mismatch_rejected(self, validator):
        with pytest.raises(AmountMismatchError) as exc_info:
            validator.validate_total_amount(Decimal("2500"), 20, Decimal("100"))
        assert exc_info.value.details == {"total_amount": "2500", "expected_amount": "2000"}

    def test_no_tolerance(self, validator):
        """A difference of one cent is still a mismatch."""
        with pytest.raises(AmountMismatchError):
            validator.validate_total_amount(Decimal("2000.01"), 20, Decimal("100"))

    def test_fractional_rate(self, validator):
        validator.validate_total_amount(Decimal("1237.50"), 3, Decimal("412.50"))

    def test_errors_share_invoice_base(self, validator):
        """Every invoice rule failure can be caught as InvoiceError."""
        with pytest.raises(InvoiceError):
            validator.validate_total_amount(Decimal("1"), 1, Decimal("2"))
