"""Per-day invoice number counter ORM model."""

from datetime import date

from sqlalchemy import Date, Integer
from sqlalchemy.orm import Mapped, mapped_column

from invoice_api.models.orm.base import Base


class InvoiceSequenceORM(Base):
    """Last invoice sequence value issued for a calendar day."""

    __tablename__ = "invoice_number_sequences"

    sequence_date: Mapped[date] = mapped_column(Date, primary_key=True)
    last_value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
