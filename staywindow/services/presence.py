"""Trip normalizer and presence-day set builder."""
import logging
from bisect import bisect_left, bisect_right
from datetime import date
from typing import Iterable, Iterator

from staywindow.errors import InvalidDateRangeError, InvalidStayError
from staywindow.schemas.engine import CalculationMode, EngineConfig
from staywindow.schemas.stay import Stay
from staywindow.services.days import from_ordinal, ordinal, to_day
from staywindow.services.territory import is_counted

log = logging.getLogger(__name__)


class PresenceDaySet:
    """Deduplicated, sorted set of counted days (stored as ordinals).

    Built per computation call and never shared across calls.
    """

    __slots__ = ("_days", "_sorted")

    def __init__(self, ordinals: Iterable[int] = ()):
        self._days = frozenset(ordinals)
        self._sorted = tuple(sorted(self._days))

    def __len__(self) -> int:
        return len(self._days)

    def __contains__(self, day: object) -> bool:
        if isinstance(day, int):
            return day in self._days
        if isinstance(day, date):
            return day.toordinal() in self._days
        return False

    def __iter__(self) -> Iterator[date]:
        return (from_ordinal(n) for n in self._sorted)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PresenceDaySet):
            return NotImplemented
        return self._days == other._days

    def __repr__(self) -> str:
        return f"PresenceDaySet({len(self)} days)"

    def has_ordinal(self, n: int) -> bool:
        return n in self._days

    def count_between(self, first: int, last: int) -> int:
        """Number of days with ordinal in [first, last]."""
        if last < first:
            return 0
        return bisect_right(self._sorted, last) - bisect_left(self._sorted, first)

    def dates(self) -> list[date]:
        return [from_ordinal(n) for n in self._sorted]

    def bounds(self) -> tuple[date, date] | None:
        """Earliest and latest counted day, or None when empty."""
        if not self._sorted:
            return None
        return from_ordinal(self._sorted[0]), from_ordinal(self._sorted[-1])


def validate_stay(stay: Stay) -> None:
    """Reject stays that break the caller contract."""
    if stay.exit_date is not None and stay.exit_date < stay.entry_date:
        raise InvalidDateRangeError(stay.entry_date, stay.exit_date, "stay")
    if not stay.territory or not stay.territory.strip():
        raise InvalidStayError("territory", stay.territory, "Territory is required")


def stay_day_range(stay: Stay, config: EngineConfig, reference: date) -> tuple[int, int] | None:
    """Inclusive ordinal range a qualifying stay contributes, or None.

    Ongoing stays run through the reference date. Days before the effective start never count;
    in audit mode nothing after the reference date counts either.
    """
    entry = stay.entry_date
    exit_effective = stay.exit_date if stay.exit_date is not None else reference
    if exit_effective < config.effective_start_date:
        return None
    if config.mode == CalculationMode.audit:
        if entry > reference:
            return None
        exit_effective = min(exit_effective, reference)
    start = max(entry, config.effective_start_date)
    if exit_effective < start:
        return None
    return ordinal(start), ordinal(exit_effective)


def is_same_stay(stay: Stay, other: Stay) -> bool:
    """Same record: the same object, or both carrying the same non-null id."""
    return stay is other or (other.id is not None and stay.id == other.id)


def qualifying_stays(stays: Iterable[Stay], config: EngineConfig) -> Iterator[Stay]:
    """Validated, non-excluded stays in counted territories."""
    for stay in stays:
        if stay.excluded:
            continue
        validate_stay(stay)
        if not is_counted(stay.territory, config.counted_territories):
            continue
        yield stay


def build_presence_days(stays: Iterable[Stay], config: EngineConfig) -> PresenceDaySet:
    reference = to_day(config.reference_date)
    days: set[int] = set()
    for stay in qualifying_stays(stays, config):
        span = stay_day_range(stay, config, reference)
        if span is None:
            continue
        days.update(range(span[0], span[1] + 1))
    presence = PresenceDaySet(days)
    log.debug("Presence set: %d days (mode=%s, reference=%s)", len(presence), config.mode.value, reference)
    return presence
