# backend/core/validators.py

"""
Field checks shared by the reservation writer, orders and accounts.
Each helper returns the cleaned value or raises InvalidInputError with a
message the client can show as is.
"""

from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email

from .exceptions import InvalidInputError


def require_text(value: Optional[str], message: str) -> str:
    """Strip and return `value`; reject None or blank strings."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidInputError(message)
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def normalize_email(value: Optional[str]) -> str:
    """Check the basic shape of an email address without DNS lookups."""
    email = require_text(value, "Email address is required")
    try:
        result = validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise InvalidInputError("Please enter a valid email address")
    return result.normalized


def positive_int(value: Any, message: str) -> int:
    """
    Accept ints (and integral ASCII strings) greater than zero; bools are
    rejected. Unicode digits such as "²" are not whole numbers here.
    """
    if isinstance(value, bool):
        raise InvalidInputError(message)
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.lstrip("-").isdigit()):
            raise InvalidInputError(message)
        try:
            value = int(value)
        except ValueError:
            raise InvalidInputError(message)
    if not isinstance(value, int) or value < 1:
        raise InvalidInputError(message)
    return value
