"""Engine configuration schemas."""
import enum
from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from staywindow.territories import DEFAULT_COUNTED_TERRITORIES


class CalculationMode(str, enum.Enum):
    audit = "audit"  # presence as of the reference date
    planning = "planning"  # recorded future stays count in full


class EngineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: CalculationMode = CalculationMode.audit
    reference_date: date | None = None
    effective_start_date: date = date(2025, 10, 12)
    day_limit: int = 90
    window_size: int = 180
    amber_threshold_days: int = 15
    counted_territories: frozenset[str] = DEFAULT_COUNTED_TERRITORIES

    @field_validator("counted_territories", mode="before")
    @classmethod
    def upper_territories(cls, v):
        if v is None:
            return DEFAULT_COUNTED_TERRITORIES
        return frozenset(str(c).strip().upper() for c in v if str(c).strip())

    @model_validator(mode="after")
    def check_limits(self) -> "EngineConfig":
        if self.day_limit < 1:
            raise ValueError("day_limit must be at least 1")
        if self.window_size < 1:
            raise ValueError("window_size must be at least 1")
        if self.amber_threshold_days < 0:
            raise ValueError("amber_threshold_days cannot be negative")
        if self.amber_threshold_days >= self.day_limit:
            raise ValueError("amber_threshold_days must be below day_limit")
        return self

    @classmethod
    def from_settings(
        cls,
        reference_date: date | None = None,
        mode: CalculationMode = CalculationMode.audit,
        settings=None,
    ) -> "EngineConfig":
        """Build a config from process settings; reference defaults to today."""
        from staywindow.config import get_settings

        s = settings or get_settings()
        return cls(
            mode=mode,
            reference_date=reference_date or date.today(),
            effective_start_date=s.effective_start_date,
            day_limit=s.day_limit,
            window_size=s.window_size,
            amber_threshold_days=s.amber_threshold_days,
            counted_territories=s.territory_codes() or DEFAULT_COUNTED_TERRITORIES,
        )

    def at(self, reference_date: date, mode: CalculationMode | None = None) -> "EngineConfig":
        """Copy of this config anchored at another reference date."""
        update = {"reference_date": reference_date}
        if mode is not None:
            update["mode"] = mode
        return self.model_copy(update=update)
