"""Repositories package."""

from invoice_api.repositories.contract_repository import ContractRepository
from invoice_api.repositories.employee_repository import EmployeeRepository
from invoice_api.repositories.invoice_repository import InvoiceRepository
from invoice_api.repositories.invoice_sequence_repository import InvoiceSequenceRepository

__all__ = [
    "ContractRepository",
    "EmployeeRepository",
    "InvoiceRepository",
    "InvoiceSequenceRepository",
]
