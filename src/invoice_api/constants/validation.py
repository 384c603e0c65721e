"""Centralized business-rule constants for contracts and invoices.

This module provides a single source of truth for the limits and formats
used by the validators. Values that operators may need to change are also
exposed through ``Settings`` and default to the constants below.
"""

from decimal import Decimal
from typing import Final

# =============================================================================
# Contract Constants
# =============================================================================

MAX_DAILY_RATE: Final[Decimal] = Decimal("10000")
MIN_DAILY_RATE_EXCLUSIVE: Final[Decimal] = Decimal("0")

# =============================================================================
# Working Day Constants
# =============================================================================

# date.weekday(): Monday == 0 ... Sunday == 6
WEEKEND_WEEKDAYS: Final[frozenset[int]] = frozenset({5, 6})

# =============================================================================
# Invoice Constants
# =============================================================================

MIN_DAYS_WORKED: Final[int] = 1
MAX_DAYS_WORKED: Final[int] = 366

DEFAULT_INVOICE_NUMBER_PREFIX: Final[str] = "INV"
INVOICE_NUMBER_DATE_FORMAT: Final[str] = "%Y%m%d"
INVOICE_NUMBER_SEQUENCE_WIDTH: Final[int] = 4

# =============================================================================
# Text Length Constants
# =============================================================================

MAX_NAME_LENGTH: Final[int] = 100
MAX_EMAIL_LENGTH: Final[int] = 255
MAX_PHONE_LENGTH: Final[int] = 50
MAX_DEPARTMENT_LENGTH: Final[int] = 100
MAX_POSITION_LENGTH: Final[int] = 100
MAX_INVOICE_NUMBER_LENGTH: Final[int] = 32
