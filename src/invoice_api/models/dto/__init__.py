"""Data transfer objects package."""

from invoice_api.models.dto.contract import ContractCreate, ContractResponse, ContractUpdate
from invoice_api.models.dto.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from invoice_api.models.dto.invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate

__all__ = [
    "ContractCreate",
    "ContractResponse",
    "ContractUpdate",
    "EmployeeCreate",
    "EmployeeResponse",
    "EmployeeUpdate",
    "InvoiceCreate",
    "InvoiceResponse",
    "InvoiceUpdate",
]
