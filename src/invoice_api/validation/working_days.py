"""Billable working day calculation."""

from datetime import date, timedelta

from invoice_api.constants.validation import WEEKEND_WEEKDAYS
from invoice_api.exceptions import InvalidRangeError


class WorkingDaysCalculator:
    """Counts Monday-Friday days in an inclusive date range.

    No holiday calendar is applied: public holidays count as working days.
    """

    def __init__(self, weekend: frozenset[int] = WEEKEND_WEEKDAYS) -> None:
        self.weekend = weekend

    def working_days(self, start_date: date, end_date: date) -> int:
        """Count working days in [start_date, end_date].

        Raises:
            InvalidRangeError: If the range contains no days
        """
        total_days = (end_date - start_date).days + 1
        if total_days <= 0:
            raise InvalidRangeError(start_date, end_date)

        full_weeks, remainder = divmod(total_days, 7)
        count = full_weeks * (7 - len(self.weekend))
        for offset in range(remainder):
            day = start_date + timedelta(days=full_weeks * 7 + offset)
            if day.weekday() not in self.weekend:
                count += 1
        return count


_default_calculator = WorkingDaysCalculator()


def working_days(start_date: date, end_date: date) -> int:
    """Count working days with the default Saturday/Sunday weekend."""
    return _default_calculator.working_days(start_date, end_date)
