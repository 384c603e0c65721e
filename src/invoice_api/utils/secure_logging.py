"""Secure logging utilities to prevent information disclosure."""

import logging
import re
from functools import lru_cache

from invoice_api.config import get_settings


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    """Check if application is running in debug mode."""
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Sanitize exception message for logging in production.

    Removes connection strings, email addresses and long tokens.

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized error message suitable for production logs
    """
    error_msg = str(error)

    url_pattern = r"(postgresql|postgres|postgresql\+asyncpg)://[^\s]+"
    error_msg = re.sub(url_pattern, "[URL]", error_msg)

    error_msg = re.sub(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+", "[EMAIL]", error_msg)

    error_msg = re.sub(r"[a-zA-Z0-9_\-]{32,}", "[TOKEN]", error_msg)

    if len(error_msg) > 200:
        error_msg = error_msg[:197] + "..."

    return error_msg


def log_rule_violation(logger: logging.Logger, message: str, error: Exception) -> None:
    """Log a rejected business rule at warning level.

    Rule violations are expected outcomes, so they never carry a traceback.
    """
    if is_debug_mode():
        logger.warning(f"{message}: {error} {getattr(error, 'details', {})}")
    else:
        logger.warning(f"{message}: {sanitize_exception_message(error)}")
