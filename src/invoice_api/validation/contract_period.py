"""Contract period and daily rate rules."""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, date, datetime
from decimal import Decimal

from invoice_api.constants.validation import MAX_DAILY_RATE, MIN_DAILY_RATE_EXCLUSIVE
from invoice_api.exceptions import (
    ContractOverlapError,
    PastStartError,
    PeriodOrderError,
    RateTooHighError,
    RateTooLowError,
)
from invoice_api.models.domain.contract import Contract
from invoice_api.validation.periods import first_overlapping

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Current UTC calendar date."""
    return datetime.now(UTC).date()


class ContractPeriodValidator:
    """Validates a contract against the employee's other contracts.

    The reference date is read from an injected clock so past-start checks
    are reproducible in tests.
    """

    def __init__(
        self,
        today: Callable[[], date] = utc_today,
        max_daily_rate: Decimal = MAX_DAILY_RATE,
        allow_past_start: bool = False,
    ) -> None:
        self.today = today
        self.max_daily_rate = max_daily_rate
        self.allow_past_start = allow_past_start

    def validate(
        self,
        start_date: date,
        end_date: date,
        employee_id: int,
        existing_contracts: Iterable[Contract],
        exclude_contract_id: int | None = None,
    ) -> None:
        """Validate a contract period.

        Args:
            start_date: Contract start (inclusive)
            end_date: Contract end (inclusive)
            employee_id: Owner of the contract
            existing_contracts: Snapshot of contracts to check against
            exclude_contract_id: Contract being edited, skipped in the overlap check

        Raises:
            PeriodOrderError: If start_date is not before end_date
            PastStartError: If start_date is before today
            ContractOverlapError: If another contract of the employee overlaps
        """
        if start_date >= end_date:
            raise PeriodOrderError(start_date, end_date, subject="Contract")

        today = self.today()
        if not self.allow_past_start and start_date < today:
            raise PastStartError(start_date, today)

        same_employee = [c for c in existing_contracts if c.employee_id == employee_id]
        conflict = first_overlapping(start_date, end_date, same_employee, exclude_contract_id)
        if conflict is not None:
            logger.debug(
                "Contract period %s - %s for employee %s overlaps contract %s",
                start_date,
                end_date,
                employee_id,
                conflict.id,
            )
            raise ContractOverlapError(conflict.id, conflict.start_date, conflict.end_date)

    def validate_daily_rate(self, rate: Decimal) -> None:
        """Validate a daily rate.

        Raises:
            RateTooLowError: If rate is zero or negative
            RateTooHighError: If rate exceeds the configured maximum
        """
        if rate <= MIN_DAILY_RATE_EXCLUSIVE:
            raise RateTooLowError(rate)
        if rate > self.max_daily_rate:
            raise RateTooHighError(rate, self.max_daily_rate)
