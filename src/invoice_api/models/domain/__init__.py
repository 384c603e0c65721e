"""Domain models package."""

from invoice_api.models.domain.contract import Contract, ContractType, PayGrade
from invoice_api.models.domain.employee import Employee
from invoice_api.models.domain.invoice import Invoice, InvoiceStatus

__all__ = [
    "Contract",
    "ContractType",
    "Employee",
    "Invoice",
    "InvoiceStatus",
    "PayGrade",
]
