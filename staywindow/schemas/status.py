"""Engine output schemas. All are immutable values with no references back into inputs."""
import enum
from datetime import date

from pydantic import BaseModel, ConfigDict


class RiskLevel(str, enum.Enum):
    green = "green"
    amber = "amber"
    red = "red"


class DailyStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    days_used: int
    days_remaining: int  # negative when over the limit
    risk_level: RiskLevel

    @property
    def is_compliant(self) -> bool:
        return self.days_remaining > 0


class ForecastResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    territory: str
    entry_date: date
    exit_date: date
    trip_duration: int
    is_counted_territory: bool
    days_used_before_trip: int
    days_after_trip: int
    days_remaining_after_trip: int
    risk_level: RiskLevel
    is_compliant: bool
    compliant_from_date: date | None = None
    # False when compliant_from_date is the search-horizon fallback, not a proven date
    compliant_from_conclusive: bool | None = None
    stay_id: str | None = None


class CompliantStart(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    conclusive: bool
    days_used_before: int


class SafeEntryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    can_enter_today: bool
    # None when entry is already possible, or when no date within the window allows it
    earliest_safe_date: date | None
    days_until_compliant: int
    days_used_on_entry: int


class ExpiringDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    expiring_days: int
    days_used: int
    days_remaining: int
