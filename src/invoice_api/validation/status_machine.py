"""Invoice status policy."""

from invoice_api.exceptions import InvoiceNotDeletableError, InvoiceNotEditableError
from invoice_api.models.domain.invoice import InvoiceStatus


class InvoiceStatusMachine:
    """Which operations each invoice status permits.

    Transitions are not ordered: any status may be set from any other.
    """

    @staticmethod
    def can_mutate(status: InvoiceStatus | str) -> bool:
        """Period and amount fields are editable in Draft and Rejected."""
        match InvoiceStatus(status):
            case InvoiceStatus.DRAFT | InvoiceStatus.REJECTED:
                return True
            case InvoiceStatus.APPROVED:
                return False

    @staticmethod
    def can_delete(status: InvoiceStatus | str) -> bool:
        """Only Draft invoices may be deleted."""
        match InvoiceStatus(status):
            case InvoiceStatus.DRAFT:
                return True
            case InvoiceStatus.APPROVED | InvoiceStatus.REJECTED:
                return False

    @staticmethod
    def can_transition(current: InvoiceStatus | str, target: InvoiceStatus | str) -> bool:
        """Any known status may move to any known status."""
        InvoiceStatus(current)
        InvoiceStatus(target)
        return True

    @classmethod
    def ensure_mutable(cls, status: InvoiceStatus | str, invoice_id: int | None = None) -> None:
        """Raise InvoiceNotEditableError unless the status allows edits."""
        if not cls.can_mutate(status):
            raise InvoiceNotEditableError(invoice_id, status)

    @classmethod
    def ensure_deletable(cls, status: InvoiceStatus | str, invoice_id: int | None = None) -> None:
        """Raise InvoiceNotDeletableError unless the status allows deletion."""
        if not cls.can_delete(status):
            raise InvoiceNotDeletableError(invoice_id, status)


def can_mutate(status: InvoiceStatus | str) -> bool:
    """Check whether an invoice in this status may be edited."""
    return InvoiceStatusMachine.can_mutate(status)


def can_delete(status: InvoiceStatus | str) -> bool:
    """Check whether an invoice in this status may be deleted."""
    return InvoiceStatusMachine.can_delete(status)
