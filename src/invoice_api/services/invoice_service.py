"""Invoice service for billing employee contracts.

Creation and edits run the full invoice rule set against a snapshot of the
employee's other invoices while holding the employee's write lock. Invoice
numbers come from an atomic per-day counter, so two invoices created on the
same day never share a number even across processes.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from invoice_api.config import Settings, get_settings
from invoice_api.exceptions import (
    ContractNotFoundError,
    EmployeeNotFoundError,
    InvoiceNotFoundError,
    StatusPolicyError,
    ValidationError,
)
from invoice_api.models.domain.contract import Contract
from invoice_api.models.domain.invoice import Invoice
from invoice_api.models.dto.invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate
from invoice_api.models.orm.contract import ContractORM
from invoice_api.models.orm.employee import EmployeeORM
from invoice_api.models.orm.invoice import InvoiceORM
from invoice_api.repositories.contract_repository import ContractRepository
from invoice_api.repositories.employee_repository import EmployeeRepository
from invoice_api.repositories.invoice_repository import InvoiceRepository
from invoice_api.repositories.invoice_sequence_repository import InvoiceSequenceRepository
from invoice_api.utils.locks import KeyedLock, employee_write_locks
from invoice_api.utils.secure_logging import log_rule_violation
from invoice_api.validation.invoice_lifecycle import InvoiceLifecycleValidator, ValidationMode
from invoice_api.validation.invoice_number import InvoiceNumberGenerator
from invoice_api.validation.preparation import validate_and_prepare_invoice
from invoice_api.validation.status_machine import InvoiceStatusMachine

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current timezone-aware UTC time."""
    return datetime.now(UTC)


class InvoiceService:
    """Service for managing invoices."""

    def __init__(
        self,
        session: AsyncSession,
        now: Callable[[], datetime] = utc_now,
        settings: Settings | None = None,
        locks: KeyedLock = employee_write_locks,
    ) -> None:
        """Initialize service with database session."""
        settings = settings or get_settings()
        self.session = session
        self.now = now
        self.locks = locks
        self.invoice_repo = InvoiceRepository(session)
        self.contract_repo = ContractRepository(session)
        self.employee_repo = EmployeeRepository(session)
        self.sequence_repo = InvoiceSequenceRepository(session)
        self.validator = InvoiceLifecycleValidator()
        self.number_generator = InvoiceNumberGenerator(prefix=settings.invoice_number_prefix)

    async def _build_response(
        self,
        invoice: InvoiceORM,
        contract: ContractORM | None = None,
        employee: EmployeeORM | None = None,
    ) -> InvoiceResponse:
        """Build an InvoiceResponse, loading the contract and employee if not given."""
        if contract is None:
            contract = await self.contract_repo.get_by_id(invoice.contract_id)
        if employee is None:
            employee = await self.employee_repo.get_by_id(invoice.employee_id)

        if contract is None:
            raise ContractNotFoundError(invoice.contract_id)
        if employee is None:
            raise EmployeeNotFoundError(invoice.employee_id)

        domain_contract = Contract.model_validate(contract)
        domain_invoice = Invoice.model_validate(invoice)
        return InvoiceResponse(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            employee_id=invoice.employee_id,
            employee_name=employee.full_name,
            contract_id=invoice.contract_id,
            contract_type=domain_contract.contract_type,
            pay_grade=domain_contract.pay_grade,
            daily_rate=domain_contract.daily_rate,
            start_date=domain_invoice.start_date,
            end_date=domain_invoice.end_date,
            days_worked=domain_invoice.days_worked,
            total_amount=domain_invoice.total_amount,
            status=domain_invoice.status,
            created_at=invoice.created_at,
        )

    async def _get_or_raise(self, invoice_id: int, for_update: bool = False) -> InvoiceORM:
        if for_update:
            invoice = await self.invoice_repo.get_for_update(invoice_id)
        else:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)
        return invoice

    async def list_invoices(self, offset: int = 0, limit: int = 100) -> list[InvoiceResponse]:
        """List all invoices ordered by ID."""
        invoices = await self.invoice_repo.get_all(offset=offset, limit=limit)
        return [await self._build_response(i) for i in invoices]

    async def list_employee_invoices(self, employee_id: int) -> list[InvoiceResponse]:
        """List the invoices of one employee.

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        invoices = await self.invoice_repo.get_by_employee(employee_id)
        return [await self._build_response(i, employee=employee) for i in invoices]

    async def get_invoice(self, invoice_id: int) -> InvoiceResponse:
        """Get a single invoice.

        Raises:
            InvoiceNotFoundError: If the invoice does not exist
        """
        invoice = await self._get_or_raise(invoice_id)
        return await self._build_response(invoice)

    async def create_invoice(self, data: InvoiceCreate) -> InvoiceResponse:
        """Validate, number and store a new Draft invoice.

        Args:
            data: Requested invoice values

        Returns:
            The created invoice

        Raises:
            ContractNotFoundError: If the contract does not exist or belongs to another employee
            InvoiceError: If an invoice rule fails
            InvalidRangeError: If the period contains no days
        """
        contract = await self.contract_repo.get_for_employee(data.contract_id, data.employee_id)
        if contract is None:
            raise ContractNotFoundError(data.contract_id, data.employee_id)

        async with self.locks.hold(data.employee_id):
            existing = await self.invoice_repo.get_by_employee(data.employee_id)
            try:
                validated = validate_and_prepare_invoice(
                    data,
                    Contract.model_validate(contract),
                    [Invoice.model_validate(i) for i in existing],
                    ValidationMode.CREATE,
                    validator=self.validator,
                )
            except ValidationError as e:
                log_rule_violation(logger, f"Rejected invoice for employee {data.employee_id}", e)
                raise

            created_at = self.now()
            sequence = await self.sequence_repo.next_value(created_at.date())
            invoice_number = self.number_generator.generate(created_at.date(), sequence - 1)

            invoice = await self.invoice_repo.create(
                **validated.model_dump(),
                invoice_number=invoice_number,
                created_at=created_at,
            )
            await self.session.commit()

        logger.info("Created invoice %s for employee %s", invoice_number, data.employee_id)
        return await self._build_response(invoice, contract=contract)

    async def update_invoice(self, invoice_id: int, data: InvoiceUpdate) -> InvoiceResponse:
        """Re-validate and store new values for an editable invoice.

        Days worked must equal the working days in the new period. The status
        is set to whatever the caller requests. The status check runs under
        the employee's write lock against a fresh read of the invoice.

        Raises:
            InvoiceNotFoundError: If the invoice does not exist
            InvoiceNotEditableError: If the invoice status forbids edits
            ContractNotFoundError: If the invoice's contract no longer exists
            InvoiceError: If an invoice rule fails
        """
        employee_id = (await self._get_or_raise(invoice_id)).employee_id

        async with self.locks.hold(employee_id):
            invoice = await self._get_or_raise(invoice_id, for_update=True)
            try:
                InvoiceStatusMachine.ensure_mutable(invoice.status, invoice_id)
            except StatusPolicyError as e:
                log_rule_violation(logger, f"Rejected edit of invoice {invoice_id}", e)
                raise

            contract = await self.contract_repo.get_by_id(invoice.contract_id)
            if contract is None:
                raise ContractNotFoundError(invoice.contract_id)

            existing = await self.invoice_repo.get_by_employee(employee_id)
            try:
                validated = validate_and_prepare_invoice(
                    data,
                    Contract.model_validate(contract),
                    [Invoice.model_validate(i) for i in existing],
                    ValidationMode.UPDATE,
                    exclude_invoice_id=invoice_id,
                    employee_id=employee_id,
                    validator=self.validator,
                )
            except ValidationError as e:
                log_rule_violation(logger, f"Rejected update of invoice {invoice_id}", e)
                raise

            invoice = await self.invoice_repo.update(
                invoice,
                start_date=validated.start_date,
                end_date=validated.end_date,
                days_worked=validated.days_worked,
                total_amount=validated.total_amount,
                status=validated.status,
            )
            await self.session.commit()

        logger.info("Updated invoice %s", invoice_id)
        return await self._build_response(invoice, contract=contract)

    async def delete_invoice(self, invoice_id: int) -> None:
        """Delete a Draft invoice.

        Raises:
            InvoiceNotFoundError: If the invoice does not exist
            InvoiceNotDeletableError: If the invoice is not a Draft
        """
        employee_id = (await self._get_or_raise(invoice_id)).employee_id

        async with self.locks.hold(employee_id):
            invoice = await self._get_or_raise(invoice_id, for_update=True)
            try:
                InvoiceStatusMachine.ensure_deletable(invoice.status, invoice_id)
            except StatusPolicyError as e:
                log_rule_violation(logger, f"Rejected delete of invoice {invoice_id}", e)
                raise

            await self.invoice_repo.delete(invoice)
            await self.session.commit()

        logger.info("Deleted invoice %s", invoice_id)
