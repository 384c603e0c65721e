"""Services package."""

from invoice_api.services.contract_service import ContractService
from invoice_api.services.employee_service import EmployeeService
from invoice_api.services.invoice_service import InvoiceService
from invoice_api.services.seeding_service import DataSeedingService

__all__ = [
    "ContractService",
    "DataSeedingService",
    "EmployeeService",
    "InvoiceService",
]
