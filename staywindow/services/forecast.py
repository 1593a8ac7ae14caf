"""Forecast engine: would a prospective stay breach the limit, and if so from when is it safe."""
import logging
from datetime import date
from typing import Sequence

from staywindow.errors import InvalidStayError
from staywindow.schemas.engine import CalculationMode, EngineConfig
from staywindow.schemas.stay import Stay
from staywindow.schemas.status import ForecastResult, RiskLevel
from staywindow.services.days import to_day
from staywindow.services.presence import build_presence_days, is_same_stay, validate_stay
from staywindow.services.risk import classify
from staywindow.services.safe_entry import find_compliant_start
from staywindow.services.territory import is_counted
from staywindow.services.window import days_used_in_window

log = logging.getLogger(__name__)

_RISK_ORDER = {RiskLevel.red: 0, RiskLevel.amber: 1, RiskLevel.green: 2}


def stays_before(entry_date: date, all_stays: Sequence[Stay], prospective: Stay | None = None) -> list[Stay]:
    """Non-excluded stays entering strictly before entry_date, other than the prospective one."""
    return [
        s
        for s in all_stays
        if not s.excluded
        and (prospective is None or not is_same_stay(s, prospective))
        and s.entry_date < entry_date
    ]


def days_used_before(
    entry_date: date, all_stays: Sequence[Stay], config: EngineConfig, prospective: Stay | None = None
) -> int:
    """Days already used in the window ending on entry_date, seen from entry_date itself."""
    cfg = config.at(entry_date, CalculationMode.planning)
    presence = build_presence_days(stays_before(entry_date, all_stays, prospective), cfg)
    return days_used_in_window(presence, entry_date, cfg)


def forecast(prospective: Stay, all_stays: Sequence[Stay], config: EngineConfig) -> ForecastResult:
    validate_stay(prospective)
    if prospective.exit_date is None:
        raise InvalidStayError("exit_date", None, "A prospective stay needs an exit date")
    # The whole history is checked, not only the stays that end up counted
    for s in all_stays:
        if not s.excluded:
            validate_stay(s)
    duration = prospective.duration_days()
    counted = is_counted(prospective.territory, config.counted_territories)

    before = days_used_before(prospective.entry_date, all_stays, config, prospective)
    after = before + duration if counted else before
    remaining = config.day_limit - after
    compliant = after < config.day_limit

    compliant_from = None
    conclusive = None
    if counted and not compliant:
        start = find_compliant_start(prospective, all_stays, config)
        compliant_from, conclusive = start.date, start.conclusive

    log.debug(
        "Forecast %s %s..%s: before=%d after=%d compliant=%s",
        prospective.territory,
        prospective.entry_date,
        prospective.exit_date,
        before,
        after,
        compliant,
    )
    return ForecastResult(
        territory=prospective.territory,
        entry_date=prospective.entry_date,
        exit_date=prospective.exit_date,
        trip_duration=duration,
        is_counted_territory=counted,
        days_used_before_trip=before,
        days_after_trip=after,
        days_remaining_after_trip=remaining,
        risk_level=classify(remaining, config.amber_threshold_days),
        is_compliant=compliant,
        compliant_from_date=compliant_from,
        compliant_from_conclusive=conclusive,
        stay_id=prospective.id,
    )


def what_if(
    entry_date: date,
    exit_date: date,
    territory: str,
    all_stays: Sequence[Stay],
    config: EngineConfig,
) -> ForecastResult:
    """Forecast for a scenario stay that is not part of the recorded history."""
    scenario = Stay(
        entry_date=to_day(entry_date, "entry date"),
        exit_date=to_day(exit_date, "exit date"),
        territory=territory.strip().upper(),
    )
    return forecast(scenario, all_stays, config)


def forecast_upcoming(all_stays: Sequence[Stay], config: EngineConfig) -> list[ForecastResult]:
    """Forecasts for every recorded stay entering on or after the reference date."""
    today = to_day(config.reference_date)
    return [
        forecast(s, all_stays, config)
        for s in all_stays
        if not s.excluded and s.exit_date is not None and s.entry_date >= today
    ]


def max_stay_days(all_stays: Sequence[Stay], entry_date: date, config: EngineConfig) -> int:
    """Longest stay starting on entry_date that a forecast would still call compliant."""
    before = days_used_before(to_day(entry_date, "entry date"), all_stays, config)
    return max(0, config.day_limit - 1 - before)


def filter_by_risk(results: Sequence[ForecastResult], which: str = "all") -> list[ForecastResult]:
    if which == "all":
        return list(results)
    if which == "at-risk":
        return [r for r in results if r.risk_level != RiskLevel.green]
    if which == "critical":
        return [r for r in results if r.risk_level == RiskLevel.red]
    raise ValueError(f"Unknown risk filter: {which}")


def sort_forecasts(results: Sequence[ForecastResult], field: str = "date", descending: bool = False) -> list[ForecastResult]:
    if field == "date":
        key = lambda r: (r.entry_date, r.exit_date)  # noqa: E731
    elif field == "risk":
        key = lambda r: (_RISK_ORDER[r.risk_level], r.entry_date)  # noqa: E731
    else:
        raise ValueError(f"Unknown sort field: {field}")
    return sorted(results, key=key, reverse=descending)
