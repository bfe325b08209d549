"""Calendar date helpers working on plain ISO `YYYY-MM-DD` strings."""

from __future__ import annotations

import datetime as dt
import re

from wandr.domain.exceptions import InvalidInputError

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: str) -> dt.date:
    if not isinstance(value, str) or not _ISO_DATE_PATTERN.match(value.strip()):
        raise InvalidInputError(f"Invalid date (expected YYYY-MM-DD): {value!r}")
    try:
        return dt.date.fromisoformat(value.strip())
    except ValueError:
        raise InvalidInputError(f"Invalid calendar date: {value!r}") from None


def format_date(value: dt.date) -> str:
    return value.isoformat()


def add_days(value: str, days: int) -> str:
    """Shift an ISO date by whole calendar days; no timezone is involved."""
    try:
        shifted = parse_date(value) + dt.timedelta(days=days)
    except OverflowError:
        raise InvalidInputError(f"Date out of range: {value!r} + {days} days") from None
    return format_date(shifted)


__all__ = ["add_days", "format_date", "parse_date"]
