"""Invoice number generation."""

from datetime import date

from invoice_api.constants.validation import (
    DEFAULT_INVOICE_NUMBER_PREFIX,
    INVOICE_NUMBER_DATE_FORMAT,
    INVOICE_NUMBER_SEQUENCE_WIDTH,
)


class InvoiceNumberGenerator:
    """Builds date-scoped sequential invoice numbers like ``INV-20240601-0004``.

    Pure: the caller supplies how many invoices already exist for the day.
    """

    def __init__(self, prefix: str = DEFAULT_INVOICE_NUMBER_PREFIX) -> None:
        self.prefix = prefix

    def generate(self, reference_date: date, count_so_far: int) -> str:
        """Return the number for the next invoice on reference_date."""
        if count_so_far < 0:
            raise ValueError("count_so_far must not be negative")
        sequence = count_so_far + 1
        return (
            f"{self.prefix}-{reference_date.strftime(INVOICE_NUMBER_DATE_FORMAT)}-"
            f"{sequence:0{INVOICE_NUMBER_SEQUENCE_WIDTH}d}"
        )


def generate_invoice_number(reference_date: date, count_so_far: int) -> str:
    """Generate an invoice number with the default prefix."""
    return InvoiceNumberGenerator().generate(reference_date, count_so_far)
