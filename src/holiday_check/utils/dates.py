"""Date helpers for the fixed DD.MM.YYYY format and interval overlap."""

import re
from datetime import date, datetime

from holiday_check.exceptions import DateParseError

DATE_PATTERN = re.compile(r"([0-9]{2})\.([0-9]{2})\.([0-9]{4})")
ISO_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def parse_strict_date(text: str) -> date:
    """Parse a DD.MM.YYYY string into a date.

    Impossible dates such as 31.02.2025 are rejected instead of rolling
    over into the next month.

    Args:
        text: The date string

    Returns:
        The parsed date

    Raises:
        DateParseError: If the text is not a real calendar date in DD.MM.YYYY format
    """
    if not isinstance(text, str):
        raise DateParseError(str(text))

    match = DATE_PATTERN.fullmatch(text)
    if match is None:
        raise DateParseError(text)

    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateParseError(text) from e


def format_date(value: date) -> str:
    """Format a date as zero-padded DD.MM.YYYY."""
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"


def intervals_overlap(
    a_start: date | None,
    a_end: date | None,
    b_start: date | None,
    b_end: date | None,
) -> bool:
    """Check whether two inclusive date intervals share at least one day.

    Returns False when any bound is missing or not a date.
    """
    bounds = (a_start, a_end, b_start, b_end)
    if not all(isinstance(bound, date) for bound in bounds):
        return False
    # datetime is a date subclass; compare calendar days only
    a_start, a_end, b_start, b_end = (_as_date(bound) for bound in bounds)
    return a_start <= b_end and b_start <= a_end


def parse_source_date(value: object) -> date | None:
    """Leniently parse a date value coming from an upstream source.

    Accepts ISO dates (2025-07-01), ISO datetimes (2025-07-01T00:00:00Z),
    DD.MM.YYYY strings and date/datetime instances.

    Returns:
        The date, or None if the value is not usable
    """
    if isinstance(value, date):
        return _as_date(value)

    if not isinstance(value, str):
        return None

    text = value.strip()
    iso = ISO_DATE_PATTERN.match(text)
    if iso is not None:
        year, month, day = (int(part) for part in iso.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None

    try:
        return parse_strict_date(text)
    except DateParseError:
        return None


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
