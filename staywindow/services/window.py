"""Window counter: days used in the trailing window ending at one reference date.

This is the direct, independently checkable count; the vector engine must agree with it
for every date.
"""
from datetime import date

from staywindow.schemas.engine import EngineConfig
from staywindow.services.days import add_days, ordinal, to_day
from staywindow.services.presence import PresenceDaySet


def window_bounds(check_date: date, config: EngineConfig) -> tuple[date, date]:
    """Inclusive [start, end] of the window at check_date, clipped at the effective start."""
    end = to_day(check_date, "check date")
    start = max(add_days(end, -(config.window_size - 1)), config.effective_start_date)
    return start, end


def is_in_window(day: date, check_date: date, config: EngineConfig) -> bool:
    start, end = window_bounds(check_date, config)
    return start <= day <= end


def days_used_in_window(presence: PresenceDaySet, check_date: date, config: EngineConfig) -> int:
    start, end = window_bounds(check_date, config)
    if end < config.effective_start_date:
        return 0
    return presence.count_between(ordinal(start), ordinal(end))


def days_remaining(presence: PresenceDaySet, check_date: date, config: EngineConfig) -> int:
    return config.day_limit - days_used_in_window(presence, check_date, config)


def is_compliant(presence: PresenceDaySet, check_date: date, config: EngineConfig) -> bool:
    # Reaching the limit exactly is already a breach
    return days_used_in_window(presence, check_date, config) < config.day_limit
