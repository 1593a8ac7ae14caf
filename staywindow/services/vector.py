"""Vector engine: daily statuses over a date range via an incremental sliding window.

The presence set is built once and the first window is counted directly; every later day
only removes the day falling out of the window and adds the day entering it, so a range
costs O(presence days + range length) instead of one full window scan per day.
"""
import logging
from datetime import date
from typing import Iterable

from staywindow.errors import InvalidDateRangeError
from staywindow.schemas.engine import EngineConfig
from staywindow.schemas.stay import Stay
from staywindow.schemas.status import DailyStatus
from staywindow.services.compliance import make_status
from staywindow.services.days import from_ordinal, month_bounds, ordinal, to_day, year_bounds
from staywindow.services.presence import build_presence_days
from staywindow.services.window import days_used_in_window

log = logging.getLogger(__name__)


def compute_vector(
    stays: Iterable[Stay],
    start_date: date,
    end_date: date,
    config: EngineConfig,
) -> list[DailyStatus]:
    """Statuses for every date in [start_date, end_date], in order."""
    to_day(config.reference_date)
    start = to_day(start_date, "start date")
    end = to_day(end_date, "end date")
    if start > end:
        raise InvalidDateRangeError(start, end)

    presence = build_presence_days(stays, config)
    cutover = ordinal(config.effective_start_date)
    back = config.window_size - 1

    first, last = ordinal(start), ordinal(end)
    count = days_used_in_window(presence, start, config)
    result: list[DailyStatus] = []
    for cur in range(first, last + 1):
        result.append(make_status(from_ordinal(cur), count, config))
        if cur == last:
            break
        # Window for cur + 1 drops cur - back and gains cur + 1
        leaving = cur - back
        if leaving >= cutover and presence.has_ordinal(leaving):
            count -= 1
        if presence.has_ordinal(cur + 1):
            count += 1

    log.debug("Computed %d daily statuses from %s to %s", len(result), start, end)
    return result


def compute_month(stays: Iterable[Stay], year: int, month: int, config: EngineConfig) -> list[DailyStatus]:
    start, end = month_bounds(year, month)
    return compute_vector(stays, start, end, config)


def compute_year(stays: Iterable[Stay], year: int, config: EngineConfig) -> list[DailyStatus]:
    start, end = year_bounds(year)
    return compute_vector(stays, start, end, config)
