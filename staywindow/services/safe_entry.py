"""Safe-entry solver: earliest date a prospective stay, or any new entry, is compliant."""
import logging
from datetime import date
from typing import Iterable, Sequence

from staywindow.schemas.engine import CalculationMode, EngineConfig
from staywindow.schemas.stay import Stay
from staywindow.schemas.status import CompliantStart, ExpiringDay, SafeEntryInfo
from staywindow.services.days import add_days, to_day
from staywindow.services.presence import build_presence_days, is_same_stay, qualifying_stays, validate_stay
from staywindow.services.territory import is_counted
from staywindow.services.vector import compute_vector
from staywindow.services.window import days_used_in_window

log = logging.getLogger(__name__)


def find_compliant_start(prospective: Stay, all_stays: Sequence[Stay], config: EngineConfig) -> CompliantStart:
    """Scan forward from the prospective entry date for up to ``window_size`` days.

    Each candidate date d sees the stays entering strictly before d, counted in planning
    mode with d as the reference. The first d where the prospective stay keeps the total
    under the limit wins. When none does, the horizon date is returned with
    ``conclusive=False``: it is not proven compliant and must be re-checked.
    """
    validate_stay(prospective)
    duration = prospective.duration_days()
    entry = prospective.entry_date
    horizon = add_days(entry, config.window_size)

    history = sorted(
        (s for s in qualifying_stays(all_stays, config) if not is_same_stay(s, prospective)),
        key=lambda s: s.entry_date,
    )
    trip_counts = is_counted(prospective.territory, config.counted_territories)
    added = duration if trip_counts else 0

    admitted: list[Stay] = []
    pointer = 0
    presence = None
    before = 0
    for offset in range(config.window_size + 1):
        candidate = add_days(entry, offset)
        cfg = config.at(candidate, CalculationMode.planning)
        grew = False
        while pointer < len(history) and history[pointer].entry_date < candidate:
            admitted.append(history[pointer])
            pointer += 1
            grew = True
        # Closed stays do not depend on the reference date; ongoing ones run through it
        if presence is None or grew or any(s.exit_date is None for s in admitted):
            presence = build_presence_days(admitted, cfg)
        before = days_used_in_window(presence, candidate, cfg)
        # A trip outside the counted territories never adds to the tally
        if before + added < config.day_limit or not trip_counts:
            return CompliantStart(date=candidate, conclusive=True, days_used_before=before)
        if duration >= config.day_limit:
            break

    return CompliantStart(date=horizon, conclusive=False, days_used_before=before)


def earliest_compliant_start(prospective: Stay, all_stays: Sequence[Stay], config: EngineConfig) -> date:
    result = find_compliant_start(prospective, all_stays, config)
    if not result.conclusive:
        log.warning(
            "No compliant start found within %d days of %s; returning horizon %s",
            config.window_size,
            prospective.entry_date,
            result.date,
        )
    return result.date


def safe_entry_info(stays: Iterable[Stay], config: EngineConfig) -> SafeEntryInfo:
    """Whether a new entry is possible on the reference date, and if not, when."""
    today = to_day(config.reference_date)
    statuses = compute_vector(stays, today, add_days(today, config.window_size), config)
    current = statuses[0]
    if current.days_used <= config.day_limit - 1:
        return SafeEntryInfo(
            can_enter_today=True,
            earliest_safe_date=None,
            days_until_compliant=0,
            days_used_on_entry=current.days_used,
        )
    for offset, status in enumerate(statuses[1:], start=1):
        if status.days_used <= config.day_limit - 1:
            return SafeEntryInfo(
                can_enter_today=False,
                earliest_safe_date=status.date,
                days_until_compliant=offset,
                days_used_on_entry=status.days_used,
            )
    last = statuses[-1]
    log.warning("Entry not possible within %d days of %s", config.window_size, today)
    # No safe date exists in the scanned range
    return SafeEntryInfo(
        can_enter_today=False,
        earliest_safe_date=None,
        days_until_compliant=len(statuses) - 1,
        days_used_on_entry=last.days_used,
    )


def project_expiring_days(stays: Iterable[Stay], config: EngineConfig, days: int) -> list[ExpiringDay]:
    """Day-by-day roll-off from the reference date for the next ``days`` days."""
    today = to_day(config.reference_date)
    statuses = compute_vector(stays, today, add_days(today, max(days, 0)), config)
    result: list[ExpiringDay] = []
    previous = statuses[0].days_used
    for i, status in enumerate(statuses):
        result.append(
            ExpiringDay(
                date=status.date,
                expiring_days=0 if i == 0 else max(0, previous - status.days_used),
                days_used=status.days_used,
                days_remaining=status.days_remaining,
            )
        )
        previous = status.days_used
    return result
