"""Point query: one subject's status on one date."""
from datetime import date
from typing import Iterable

from staywindow.schemas.engine import EngineConfig
from staywindow.schemas.stay import Stay
from staywindow.schemas.status import DailyStatus
from staywindow.services.days import to_day
from staywindow.services.presence import build_presence_days
from staywindow.services.risk import classify
from staywindow.services.window import days_used_in_window


def make_status(day: date, days_used: int, config: EngineConfig) -> DailyStatus:
    remaining = config.day_limit - days_used
    return DailyStatus(
        date=day,
        days_used=days_used,
        days_remaining=remaining,
        risk_level=classify(remaining, config.amber_threshold_days),
    )


def status_on(stays: Iterable[Stay], config: EngineConfig, on: date | None = None) -> DailyStatus:
    """Status at ``on`` (default: the config's reference date, usually today)."""
    reference = to_day(config.reference_date)
    day = to_day(on, "status date") if on is not None else reference
    presence = build_presence_days(stays, config)
    return make_status(day, days_used_in_window(presence, day, config), config)
