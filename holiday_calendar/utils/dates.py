"""
Date helpers for YYYY-MM-DD strings.

Dates are built from their year/month/day fields directly. Nothing here goes
through a timestamp, so a date never shifts with the host's timezone.
"""
from datetime import date, timedelta
from typing import Iterator

from holiday_calendar.exceptions import InvalidFormat


def parse_date_string(value: str) -> date:
    """
    Parse a YYYY-MM-DD string into a date.

    Raises:
        InvalidFormat: if the string does not split into exactly three numeric
            components or those components are not a real calendar date.
    """
    if not isinstance(value, str):
        raise InvalidFormat(f"Invalid date format: {value!r}. Expected YYYY-MM-DD")
    parts = value.strip().split("-")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidFormat(f"Invalid date format: {value}. Expected YYYY-MM-DD")
    year, month, day = (int(p) for p in parts)
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidFormat(f"Invalid date: {value}. {e}") from e


def format_date_key(value: date) -> str:
    """Day key used by calendar lookups and reconciliation keys."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end inclusive; nothing if end < start."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def year_bounds(year: int):
    return date(year, 1, 1), date(year, 12, 31)
