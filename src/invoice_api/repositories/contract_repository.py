"""Contract repository."""

from sqlalchemy import select

from invoice_api.models.orm.contract import ContractORM
from invoice_api.repositories.base import BaseRepository


class ContractRepository(BaseRepository[ContractORM]):
    """Repository for contract operations."""

    model = ContractORM

    async def get_by_employee(self, employee_id: int) -> list[ContractORM]:
        """Get all contracts of an employee ordered by ID.

        Args:
            employee_id: Employee ID

        Returns:
            List of contracts
        """
        result = await self.session.execute(
            select(ContractORM)
            .where(ContractORM.employee_id == employee_id)
            .order_by(ContractORM.id)
        )
        return list(result.scalars().all())

    async def get_for_employee(self, contract_id: int, employee_id: int) -> ContractORM | None:
        """Get a contract only if it belongs to the given employee."""
        result = await self.session.execute(
            select(ContractORM)
            .where(ContractORM.id == contract_id)
            .where(ContractORM.employee_id == employee_id)
        )
        return result.scalar_one_or_none()
