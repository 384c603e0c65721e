"""Employee repository."""

from sqlalchemy import select

from invoice_api.models.orm.employee import EmployeeORM
from invoice_api.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    async def get_by_ids(self, ids: list[int]) -> dict[int, EmployeeORM]:
        """Get multiple employees by their IDs in a single query.

        Args:
            ids: List of employee IDs

        Returns:
            Dict mapping employee ID to EmployeeORM
        """
        if not ids:
            return {}
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.id.in_(ids))
        )
        return {emp.id: emp for emp in result.scalars().all()}

    async def get_by_email(self, email: str) -> EmployeeORM | None:
        """Get employee by email (case-insensitive)."""
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.email == email.lower())
        )
        return result.scalar_one_or_none()
