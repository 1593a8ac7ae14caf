"""Calendar-day arithmetic on proleptic Gregorian ordinals.

Dates cross the API as ``datetime.date``; hot loops work on ``date.toordinal()`` integers,
so there is no time-of-day or timezone state anywhere in the engine.
"""
import calendar
import re
from datetime import date, datetime, timedelta
from typing import Iterator

from staywindow.errors import InvalidDateRangeError, InvalidReferenceDateError

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_day(value: object, field: str = "reference date") -> date:
    """Return ``value`` as a plain date, or raise InvalidReferenceDateError."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        raise InvalidReferenceDateError(value, f"{field} is required")
    raise InvalidReferenceDateError(value, f"{field} must be a date, got {type(value).__name__}")


def parse_day(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string."""
    text = (value or "").strip()
    if not _DATE_ONLY.match(text):
        raise InvalidReferenceDateError(value, "expected YYYY-MM-DD")
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidReferenceDateError(value, str(e)) from e


def ordinal(d: date) -> int:
    return d.toordinal()


def from_ordinal(n: int) -> date:
    return date.fromordinal(n)


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)


def inclusive_day_count(start: date, end: date) -> int:
    if end < start:
        raise InvalidDateRangeError(start, end)
    return (end - start).days + 1


def iter_days(start: date, end: date) -> Iterator[date]:
    cur = start
    one = timedelta(days=1)
    while cur <= end:
        yield cur
        cur += one


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= month <= 12:
        raise InvalidReferenceDateError(month, "month must be between 1 and 12")
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)
