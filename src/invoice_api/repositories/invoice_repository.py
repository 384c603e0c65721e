"""Invoice repository."""

from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import func, select

from invoice_api.models.orm.invoice import InvoiceORM
from invoice_api.repositories.base import BaseRepository


class InvoiceRepository(BaseRepository[InvoiceORM]):
    """Repository for invoice operations."""

    model = InvoiceORM

    async def get_by_employee(self, employee_id: int) -> list[InvoiceORM]:
        """Get all invoices of an employee ordered by ID.

        Args:
            employee_id: Employee ID

        Returns:
            List of invoices
        """
        result = await self.session.execute(
            select(InvoiceORM)
            .where(InvoiceORM.employee_id == employee_id)
            .order_by(InvoiceORM.id)
        )
        return list(result.scalars().all())

    async def get_for_update(self, invoice_id: int) -> InvoiceORM | None:
        """Re-read an invoice from the database and lock its row.

        Loaded attributes are overwritten, so a status changed by another
        transaction is seen even when the invoice is already in the session.
        """
        result = await self.session.execute(
            select(InvoiceORM)
            .where(InvoiceORM.id == invoice_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def count_created_on(self, day: date) -> int:
        """Count invoices whose UTC creation date is the given day, across all employees.

        Args:
            day: Calendar day

        Returns:
            Number of invoices created that day
        """
        start = datetime.combine(day, time.min, tzinfo=timezone.utc)
        end = start + timedelta(days=1)
        result = await self.session.execute(
            select(func.count(InvoiceORM.id)).where(
                InvoiceORM.created_at >= start,
                InvoiceORM.created_at < end,
            )
        )
        return result.scalar_one()

    async def count_by_contract(self, contract_id: int) -> int:
        """Count invoices billed against a contract."""
        result = await self.session.execute(
            select(func.count(InvoiceORM.id)).where(InvoiceORM.contract_id == contract_id)
        )
        return result.scalar_one()
