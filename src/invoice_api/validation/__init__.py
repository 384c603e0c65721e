"""Contract and invoice validation rules.

Everything in this package is pure: callers pass in the records to check
against and receive either prepared values or a domain exception.
"""

from invoice_api.validation.contract_period import ContractPeriodValidator
from invoice_api.validation.invoice_lifecycle import InvoiceLifecycleValidator, ValidationMode
from invoice_api.validation.invoice_number import InvoiceNumberGenerator, generate_invoice_number
from invoice_api.validation.periods import periods_overlap
from invoice_api.validation.preparation import (
    ValidatedContract,
    ValidatedInvoice,
    validate_and_prepare_contract,
    validate_and_prepare_invoice,
)
from invoice_api.validation.status_machine import InvoiceStatusMachine, can_delete, can_mutate
from invoice_api.validation.working_days import WorkingDaysCalculator, working_days

__all__ = [
    "ContractPeriodValidator",
    "InvoiceLifecycleValidator",
    "InvoiceNumberGenerator",
    "InvoiceStatusMachine",
    "ValidatedContract",
    "ValidatedInvoice",
    "ValidationMode",
    "WorkingDaysCalculator",
    "can_delete",
    "can_mutate",
    "generate_invoice_number",
    "periods_overlap",
    "validate_and_prepare_contract",
    "validate_and_prepare_invoice",
    "working_days",
]
