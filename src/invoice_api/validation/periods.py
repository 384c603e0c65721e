"""Inclusive date period helpers shared by contract and invoice rules."""

from collections.abc import Iterable
from datetime import date
from typing import Protocol, TypeVar


class Period(Protocol):
    """Anything with an id and an inclusive date period."""

    id: int | None
    start_date: date
    end_date: date


P = TypeVar("P", bound=Period)


def periods_overlap(start1: date, end1: date, start2: date, end2: date) -> bool:
    """Return True if two inclusive date ranges share at least one day."""
    return start1 <= end2 and end1 >= start2


def first_overlapping(
    start_date: date,
    end_date: date,
    records: Iterable[P],
    exclude_id: int | None = None,
) -> P | None:
    """Find the first record overlapping the given period.

    Records are checked in ascending id order so the reported conflict does
    not depend on how the caller fetched them. Records without an id sort
    last.

    Args:
        start_date: Period start (inclusive)
        end_date: Period end (inclusive)
        records: Candidate records
        exclude_id: Id of the record being edited, skipped when set

    Returns:
        The first overlapping record or None
    """
    candidates = sorted(
        (r for r in records if exclude_id is None or r.id != exclude_id),
        key=lambda r: (r.id is None, r.id or 0),
    )
    for record in candidates:
        if periods_overlap(start_date, end_date, record.start_date, record.end_date):
            return record
    return None
