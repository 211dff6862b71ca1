# backend/modules/reservations/services/booking_rules.py

"""
Date, time and party-size rules shared by the availability calculator and
the reservation writer. All helpers raise InvalidInputError.
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Any, Union

from core.exceptions import InvalidInputError
from core.validators import positive_int

# 24-hour clock, single-digit hour allowed, seconds required
TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9]$")
SHORT_TIME_PATTERN = re.compile(r"^\d{1,2}:\d{2}$")

TIME_FORMAT_MESSAGE = "Invalid time format. Please use HH:MM format (e.g., 14:30)"


def parse_date(value: Union[date, str, None]) -> date:
    """Accept a `date` or an ISO `YYYY-MM-DD` string."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInputError("Date is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidInputError("Invalid date format. Please use YYYY-MM-DD")


def normalize_time(value: Union[time, str, None]) -> time:
    """
    Parse `HH:MM` or `HH:MM:SS` (24h). `HH:MM` gets `:00` appended before the
    full pattern is checked, so a value like "18:5" is rejected.
    """
    if isinstance(value, time):
        return value.replace(microsecond=0, tzinfo=None)
    if value is None or not str(value).strip():
        raise InvalidInputError("Time is required")

    raw = str(value).strip()
    if SHORT_TIME_PATTERN.match(raw):
        raw = f"{raw}:00"
    if not TIME_PATTERN.match(raw):
        raise InvalidInputError(TIME_FORMAT_MESSAGE)

    hours, minutes, seconds = (int(part) for part in raw.split(":"))
    return time(hours, minutes, seconds)


def format_time(value: time) -> str:
    return value.strftime("%H:%M:%S")


def parse_party_size(value: Any) -> int:
    return positive_int(value, "Number of guests must be a positive whole number")


def check_party_size(party_size: int, max_party_size: int) -> int:
    if party_size > max_party_size:
        raise InvalidInputError(
            f"Number of guests must be between 1 and {max_party_size}. "
            "For larger parties please contact the restaurant directly"
        )
    return party_size


def is_within_booking_window(day: date, today: date, advance_days: int) -> bool:
    return today <= day <= today + timedelta(days=advance_days)


def check_booking_window(day: date, today: date, advance_days: int) -> date:
    if day < today:
        raise InvalidInputError("Please select a future date")
    if day > today + timedelta(days=advance_days):
        raise InvalidInputError(
            f"Reservations can only be made up to {advance_days} days in advance"
        )
    return day
