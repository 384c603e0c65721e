"""Contract service for creating and editing employee contracts."""

import logging
from collections.abc import Callable
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from invoice_api.config import Settings, get_settings
from invoice_api.exceptions import (
    ContractError,
    ContractInUseError,
    ContractNotFoundError,
    ContractReassignError,
    EmployeeNotFoundError,
)
from invoice_api.models.domain.contract import Contract
from invoice_api.models.dto.contract import ContractCreate, ContractResponse, ContractUpdate
from invoice_api.models.orm.contract import ContractORM
from invoice_api.repositories.contract_repository import ContractRepository
from invoice_api.repositories.employee_repository import EmployeeRepository
from invoice_api.repositories.invoice_repository import InvoiceRepository
from invoice_api.utils.locks import KeyedLock, employee_write_locks
from invoice_api.utils.secure_logging import log_rule_violation
from invoice_api.validation.contract_period import ContractPeriodValidator, utc_today
from invoice_api.validation.preparation import validate_and_prepare_contract

logger = logging.getLogger(__name__)


class ContractService:
    """Service for managing contracts.

    Writes for one employee are serialized through a per-employee lock so the
    overlap check and the insert happen against the same snapshot.
    """

    def __init__(
        self,
        session: AsyncSession,
        today: Callable[[], date] = utc_today,
        settings: Settings | None = None,
        locks: KeyedLock = employee_write_locks,
    ) -> None:
        """Initialize service with database session."""
        settings = settings or get_settings()
        self.session = session
        self.locks = locks
        self.contract_repo = ContractRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.invoice_repo = InvoiceRepository(session)
        self.validator = ContractPeriodValidator(
            today=today,
            max_daily_rate=settings.max_daily_rate,
            allow_past_start=settings.allow_past_contract_start,
        )

    async def _build_response(self, contract: ContractORM, employee_name: str | None = None) -> ContractResponse:
        if employee_name is None:
            employee = await self.employee_repo.get_by_id(contract.employee_id)
            employee_name = employee.full_name if employee else None

        domain = Contract.model_validate(contract)
        return ContractResponse(
            id=contract.id,
            employee_id=contract.employee_id,
            employee_name=employee_name,
            start_date=domain.start_date,
            end_date=domain.end_date,
            daily_rate=domain.daily_rate,
            pay_grade=domain.pay_grade,
            contract_type=domain.contract_type,
            display_name=domain.display_name,
        )

    async def list_contracts(self, offset: int = 0, limit: int = 100) -> list[ContractResponse]:
        """List all contracts ordered by ID."""
        contracts = await self.contract_repo.get_all(offset=offset, limit=limit)
        employees = await self.employee_repo.get_by_ids(list({c.employee_id for c in contracts}))
        responses = []
        for contract in contracts:
            employee = employees.get(contract.employee_id)
            responses.append(
                await self._build_response(contract, employee.full_name if employee else None)
            )
        return responses

    async def list_employee_contracts(self, employee_id: int) -> list[ContractResponse]:
        """List the contracts of one employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        contracts = await self.contract_repo.get_by_employee(employee_id)
        return [await self._build_response(c, employee.full_name) for c in contracts]

    async def get_contract(self, contract_id: int) -> ContractResponse:
        """Get a single contract.

        Raises:
            ContractNotFoundError: If the contract does not exist
        """
        contract = await self.contract_repo.get_by_id(contract_id)
        if contract is None:
            raise ContractNotFoundError(contract_id)
        return await self._build_response(contract)

    async def create_contract(self, data: ContractCreate) -> ContractResponse:
        """Validate and store a new contract.

        Args:
            data: Requested contract values

        Returns:
            The created contract

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            ContractError: If a contract rule fails
        """
        employee = await self.employee_repo.get_by_id(data.employee_id)
        if employee is None:
            raise EmployeeNotFoundError(data.employee_id)

        async with self.locks.hold(data.employee_id):
            existing = await self.contract_repo.get_by_employee(data.employee_id)
            try:
                validated = validate_and_prepare_contract(
                    data,
                    [Contract.model_validate(c) for c in existing],
                    validator=self.validator,
                )
            except ContractError as e:
                log_rule_violation(logger, f"Rejected contract for employee {data.employee_id}", e)
                raise

            contract = await self.contract_repo.create(**validated.model_dump())
            await self.session.commit()

        logger.info("Created contract %s for employee %s", contract.id, data.employee_id)
        return await self._build_response(contract, employee.full_name)

    async def update_contract(self, contract_id: int, data: ContractUpdate) -> ContractResponse:
        """Re-validate and store new values for an existing contract.

        The contract being edited is excluded from its own overlap check. A
        contract may only move to another employee while no invoice bills
        against it.

        Raises:
            ContractNotFoundError: If the contract does not exist
            EmployeeNotFoundError: If the target employee does not exist
            ContractReassignError: If a contract with invoices changes employee
            ContractError: If a contract rule fails
        """
        contract = await self.contract_repo.get_by_id(contract_id)
        if contract is None:
            raise ContractNotFoundError(contract_id)

        employee = await self.employee_repo.get_by_id(data.employee_id)
        if employee is None:
            raise EmployeeNotFoundError(data.employee_id)

        # Both owners are locked on a move
        async with self.locks.hold_many(contract.employee_id, data.employee_id):
            if data.employee_id != contract.employee_id:
                invoice_count = await self.invoice_repo.count_by_contract(contract_id)
                if invoice_count:
                    raise ContractReassignError(contract_id, data.employee_id, invoice_count)

            existing = await self.contract_repo.get_by_employee(data.employee_id)
            try:
                validated = validate_and_prepare_contract(
                    data,
                    [Contract.model_validate(c) for c in existing],
                    validator=self.validator,
                    exclude_contract_id=contract_id,
                )
            except ContractError as e:
                log_rule_violation(logger, f"Rejected update of contract {contract_id}", e)
                raise

            contract = await self.contract_repo.update(contract, **validated.model_dump())
            await self.session.commit()

        logger.info("Updated contract %s", contract_id)
        return await self._build_response(contract, employee.full_name)

    async def delete_contract(self, contract_id: int) -> None:
        """Delete a contract that no invoice bills against.

        Raises:
            ContractNotFoundError: If the contract does not exist
            ContractInUseError: If invoices reference the contract
        """
        contract = await self.contract_repo.get_by_id(contract_id)
        if contract is None:
            raise ContractNotFoundError(contract_id)

        async with self.locks.hold(contract.employee_id):
            invoice_count = await self.invoice_repo.count_by_contract(contract_id)
            if invoice_count:
                raise ContractInUseError(contract_id, invoice_count)

            await self.contract_repo.delete(contract)
            await self.session.commit()

        logger.info("Deleted contract %s", contract_id)
