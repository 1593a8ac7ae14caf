"""
Tests for calendar-day helpers.
"""
from datetime import date, datetime

import pytest

from staywindow.errors import InvalidDateRangeError, InvalidReferenceDateError
from staywindow.schemas import Stay
from staywindow.services.days import (
    add_days,
    inclusive_day_count,
    iter_days,
    month_bounds,
    parse_day,
    to_day,
    year_bounds,
)


def test_inclusive_day_count():
    assert inclusive_day_count(date(2026, 1, 1), date(2026, 1, 1)) == 1
    assert inclusive_day_count(date(2026, 1, 1), date(2026, 1, 2)) == 2
    assert inclusive_day_count(date(2024, 2, 28), date(2024, 3, 1)) == 3
    with pytest.raises(InvalidDateRangeError):
        inclusive_day_count(date(2026, 1, 2), date(2026, 1, 1))


def test_stay_duration():
    assert Stay(entry_date=date(2026, 1, 1), exit_date=date(2026, 1, 10), territory="FR").duration_days() == 10


def test_to_day():
    assert to_day(datetime(2026, 1, 1, 23, 59)) == date(2026, 1, 1)
    assert to_day(date(2026, 1, 1)) == date(2026, 1, 1)
    with pytest.raises(InvalidReferenceDateError):
        to_day(None)
    with pytest.raises(InvalidReferenceDateError):
        to_day("2026-01-01")


def test_parse_day():
    assert parse_day(" 2024-02-29 ") == date(2024, 2, 29)
    for bad in ("2025-02-29", "2025-2-1", "01/02/2025", ""):
        with pytest.raises(InvalidReferenceDateError):
            parse_day(bad)


def test_iteration_and_bounds():
    assert list(iter_days(date(2025, 12, 30), date(2026, 1, 2))) == [
        date(2025, 12, 30),
        date(2025, 12, 31),
        date(2026, 1, 1),
        date(2026, 1, 2),
    ]
    assert list(iter_days(date(2026, 1, 2), date(2026, 1, 1))) == []
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert month_bounds(2023, 2) == (date(2023, 2, 1), date(2023, 2, 28))
    assert year_bounds(2026) == (date(2026, 1, 1), date(2026, 12, 31))
