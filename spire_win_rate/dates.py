"""
Slay the Spire timestamp helpers.

The game stores run dates as compact strings like '20250502172604', which is
2025-05-02 17:26:04 written as YYYYMMDDHHmmss.
"""

from datetime import datetime

from .errors import MalformedTimestamp

SPIRE_DATE_LENGTH = 14


def is_spire_date(value) -> bool:
    """True if value is exactly 14 ASCII digits."""
    return (
        isinstance(value, str)
        and len(value) == SPIRE_DATE_LENGTH
        and value.isascii()
        and value.isdigit()
    )


def _split_spire_date(value) -> tuple:
    if not is_spire_date(value):
        raise MalformedTimestamp(
            f"Expected a {SPIRE_DATE_LENGTH} digit timestamp, got {value!r}",
            details={"value": value},
        )
    return value[0:4], value[4:6], value[6:8], value[8:10], value[10:12], value[12:14]


def format_spire_date(value: str) -> str:
    """
    Render a Slay the Spire date string in a readable form.

    Seconds are dropped: '20250502172604' becomes '2025 - 05 02, 17:26'.

    Args:
        value: 14 digit YYYYMMDDHHmmss string

    Returns:
        Formatted date string

    Raises:
        MalformedTimestamp: If value is not exactly 14 digits
    """
    year, month, day, hour, minute, _second = _split_spire_date(value)
    return f"{year} - {month} {day}, {hour}:{minute}"


def parse_spire_date(value: str) -> datetime:
    """Parse a Slay the Spire date string into a datetime."""
    year, month, day, hour, minute, second = _split_spire_date(value)
    try:
        return datetime(int(year), int(month), int(day), int(hour), int(minute), int(second))
    except ValueError as e:
        raise MalformedTimestamp(f"Invalid calendar date {value!r}: {e}", details={"value": value}) from e
