"""SQLAlchemy ORM models package."""

from invoice_api.models.orm.base import Base
from invoice_api.models.orm.contract import ContractORM
from invoice_api.models.orm.employee import EmployeeORM
from invoice_api.models.orm.invoice import InvoiceORM
from invoice_api.models.orm.invoice_sequence import InvoiceSequenceORM

__all__ = [
    "Base",
    "ContractORM",
    "EmployeeORM",
    "InvoiceORM",
    "InvoiceSequenceORM",
]
