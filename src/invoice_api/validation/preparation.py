"""Entry points the service layer calls before persisting contracts and invoices."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from invoice_api.models.domain.contract import Contract, ContractType, PayGrade
from invoice_api.models.domain.invoice import Invoice, InvoiceStatus
from invoice_api.models.dto.contract import ContractCreate, ContractUpdate
from invoice_api.models.dto.invoice import InvoiceCreate, InvoiceUpdate
from invoice_api.validation.contract_period import ContractPeriodValidator
from invoice_api.validation.invoice_lifecycle import InvoiceLifecycleValidator, ValidationMode


class ValidatedContract(BaseModel):
    """Contract values that passed every contract rule."""

    employee_id: int
    start_date: date
    end_date: date
    daily_rate: Decimal
    pay_grade: PayGrade
    contract_type: ContractType


class ValidatedInvoice(BaseModel):
    """Invoice values that passed every invoice rule, with derived fields filled in."""

    employee_id: int
    contract_id: int
    start_date: date
    end_date: date
    days_worked: int
    total_amount: Decimal
    status: InvoiceStatus


def validate_and_prepare_contract(
    data: ContractCreate | ContractUpdate,
    existing_contracts: Iterable[Contract],
    *,
    validator: ContractPeriodValidator,
    exclude_contract_id: int | None = None,
) -> ValidatedContract:
    """Run the contract rules and return the values to store.

    Args:
        data: Requested contract values
        existing_contracts: Snapshot of the employee's contracts
        validator: Configured contract validator
        exclude_contract_id: Contract being edited

    Returns:
        ValidatedContract

    Raises:
        ContractError: If any contract rule fails
    """
    validator.validate(
        data.start_date,
        data.end_date,
        data.employee_id,
        existing_contracts,
        exclude_contract_id=exclude_contract_id,
    )
    validator.validate_daily_rate(data.daily_rate)
    return ValidatedContract(
        employee_id=data.employee_id,
        start_date=data.start_date,
        end_date=data.end_date,
        daily_rate=data.daily_rate,
        pay_grade=data.pay_grade,
        contract_type=data.contract_type,
    )


def validate_and_prepare_invoice(
    data: InvoiceCreate | InvoiceUpdate,
    contract: Contract,
    existing_invoices: Iterable[Invoice],
    mode: ValidationMode,
    *,
    exclude_invoice_id: int | None = None,
    employee_id: int | None = None,
    validator: InvoiceLifecycleValidator | None = None,
) -> ValidatedInvoice:
    """Run the invoice rules and return the values to store.

    On create the claimed days are kept and the status starts as Draft. On
    update the stored days are the computed working days and the requested
    status is taken as given.

    Args:
        data: Requested invoice values
        contract: Contract the invoice bills against
        existing_invoices: Snapshot of the employee's invoices
        mode: Create or update
        exclude_invoice_id: Invoice being edited
        employee_id: Owner of the invoice, taken from a create request or else
            from the contract when omitted
        validator: Lifecycle validator, a default one when omitted

    Returns:
        ValidatedInvoice

    Raises:
        InvoiceError: If any invoice rule fails
        InvalidRangeError: If the period contains no days
    """
    validator = validator or InvoiceLifecycleValidator()

    validator.validate_period(data.start_date, data.end_date, contract)

    if employee_id is None:
        employee_id = data.employee_id if isinstance(data, InvoiceCreate) else contract.employee_id

    same_employee = [i for i in existing_invoices if i.employee_id == employee_id]
    validator.validate_no_overlap(
        data.start_date,
        data.end_date,
        same_employee,
        exclude_invoice_id=exclude_invoice_id,
    )

    computed_days = validator.compute_and_validate_days_worked(
        data.start_date,
        data.end_date,
        data.days_worked,
        mode,
    )
    days_worked = data.days_worked if mode == ValidationMode.CREATE else computed_days

    total_amount = days_worked * contract.daily_rate
    validator.validate_total_amount(total_amount, days_worked, contract.daily_rate)

    if isinstance(data, InvoiceUpdate):
        status = data.status
    else:
        status = InvoiceStatus.DRAFT

    return ValidatedInvoice(
        employee_id=employee_id,
        contract_id=contract.id,
        start_date=data.start_date,
        end_date=data.end_date,
        days_worked=days_worked,
        total_amount=total_amount,
        status=status,
    )
