"""Per-day invoice number counter repository."""

from datetime import date

from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from invoice_api.models.orm.invoice_sequence import InvoiceSequenceORM


class InvoiceSequenceRepository:
    """Atomic per-day sequence used to number invoices."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def next_value(self, day: date) -> int:
        """Increment and return the counter for a day in a single statement.

        Concurrent callers each receive a distinct value; the row lock taken
        by the upsert is held until the surrounding transaction ends.

        Args:
            day: Calendar day the invoice is numbered under

        Returns:
            The new counter value, starting at 1
        """
        stmt = (
            insert(InvoiceSequenceORM)
            .values(sequence_date=day, last_value=1)
            .on_conflict_do_update(
                index_elements=[InvoiceSequenceORM.sequence_date],
                set_={"last_value": InvoiceSequenceORM.last_value + 1},
            )
            .returning(InvoiceSequenceORM.last_value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
