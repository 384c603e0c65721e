"""Tests for contract period and daily rate rules."""

from datetime import date
from decimal import Decimal

import pytest

from invoice_api.exceptions import (
    ContractError,
    ContractOverlapError,
    PastStartError,
    PeriodOrderError,
    RateTooHighError,
    RateTooLowError,
)
from invoice_api.validation.contract_period import ContractPeriodValidator

from factories import make_contract


@pytest.fixture
def validator() -> ContractPeriodValidator:
    return ContractPeriodValidator(today=lambda: date(2024, 1, 1))


class TestContractPeriod:
    """Tests for ContractPeriodValidator.validate."""

    def test_valid_period_with_no_contracts(self, validator):
        """A future period with no existing contracts passes."""
        validator.validate(date(2024, 2, 1), date(2024, 6, 30), 1, [])

    @pytest.mark.parametrize(
        "start,end",
        [
            (date(2024, 6, 30), date(2024, 2, 1)),
            (date(2024, 2, 1), date(2024, 2, 1)),
        ],
    )
    def test_start_must_precede_end(self, validator, start, end):
        """Equal or inverted dates are rejected."""
        with pytest.raises(PeriodOrderError) as exc_info:
            validator.validate(start, end, 1, [])
        assert exc_info.value.message == "Contract start date must be before end date"

    def test_period_order_checked_before_past_start(self, validator):
        """An inverted period in the past reports the ordering problem."""
        with pytest.raises(PeriodOrderError):
            validator.validate(date(2023, 6, 1), date(2023, 1, 1), 1, [])

    def test_past_start_rejected(self, validator):
        """A start before the reference date is rejected."""
        with pytest.raises(PastStartError) as exc_info:
            validator.validate(date(2023, 12, 31), date(2024, 6, 30), 1, [])
        assert exc_info.value.details == {"start_date": "2023-12-31", "today": "2024-01-01"}

    def test_start_today_allowed(self, validator):
        """Starting on the reference date itself is not in the past."""
        validator.validate(date(2024, 1, 1), date(2024, 6, 30), 1, [])

    def test_past_start_allowed_when_configured(self):
        """Backdated contracts pass when explicitly allowed."""
        validator = ContractPeriodValidator(today=lambda: date(2024, 1, 1), allow_past_start=True)
        validator.validate(date(2020, 1, 1), date(2020, 12, 31), 1, [])

    def test_overlap_rejected(self, validator):
        """A period sharing a day with another contract of the employee is rejected."""
        existing = [make_contract(id=4, start_date=date(2024, 1, 1), end_date=date(2024, 3, 31))]

        with pytest.raises(ContractOverlapError) as exc_info:
            validator.validate(date(2024, 3, 31), date(2024, 6, 30), 1, existing)

        assert "(2024-01-01 - 2024-03-31)" in exc_info.value.message
        assert exc_info.value.details["conflicting_contract_id"] == 4

    def test_adjacent_period_allowed(self, validator):
        """A period starting the day after another ends does not overlap."""
        existing = [make_contract(id=4, start_date=date(2024, 1, 1), end_date=date(2024, 3, 31))]
        validator.validate(date(2024, 4, 1), date(2024, 6, 30), 1, existing)

    def test_other_employees_ignored(self, validator):
        """Contracts of other employees never conflict."""
        existing = [make_contract(id=4, employee_id=2)]
        validator.validate(date(2024, 2, 1), date(2024, 6, 30), 1, existing)

    def test_edited_contract_excluded(self, validator):
        """Editing a contract does not conflict with its own previous period."""
        existing = [make_contract(id=4)]
        validator.validate(date(2024, 2, 1), date(2024, 6, 30), 1, existing, exclude_contract_id=4)

    def test_first_conflict_by_id(self, validator):
        """With several conflicts the lowest id is reported."""
        existing = [
            make_contract(id=9, start_date=date(2024, 5, 1), end_date=date(2024, 5, 31)),
            make_contract(id=2, start_date=date(2024, 6, 1), end_date=date(2024, 6, 30)),
        ]

        with pytest.raises(ContractOverlapError) as exc_info:
            validator.validate(date(2024, 4, 1), date(2024, 7, 1), 1, existing)

        assert exc_info.value.details["conflicting_contract_id"] == 2

    def test_errors_share_contract_base(self, validator):
        """Every contract rule failure can be caught as ContractError."""
        with pytest.raises(ContractError):
            validator.validate(date(2023, 1, 1), date(2023, 6, 1), 1, [])


class TestDailyRate:
    """Tests for ContractPeriodValidator.validate_daily_rate."""

    @pytest.mark.parametrize("rate", [Decimal("0"), Decimal("-1"), Decimal("-0.01")])
    def test_non_positive_rejected(self, validator, rate):
        """Zero and negative rates are rejected."""
        with pytest.raises(RateTooLowError):
            validator.validate_daily_rate(rate)

    @pytest.mark.parametrize("rate", [Decimal("0.01"), Decimal("450"), Decimal("10000")])
    def test_within_bounds(self, validator, rate):
        """Rates up to and including the maximum pass."""
        validator.validate_daily_rate(rate)

    def test_above_maximum_rejected(self, validator):
        """A rate above the maximum is rejected."""
        with pytest.raises(RateTooHighError) as exc_info:
            validator.validate_daily_rate(Decimal("10000.01"))
        assert exc_info.value.details["max_daily_rate"] == "10000"

    def test_configured_maximum(self):
        """The ceiling follows the configured maximum."""
        validator = ContractPeriodValidator(max_daily_rate=Decimal("500"))

        validator.validate_daily_rate(Decimal("500"))
        with pytest.raises(RateTooHighError):
            validator.validate_daily_rate(Decimal("500.50"))
