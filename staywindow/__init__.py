"""StayWindow – rolling-window day counting and trip forecasting."""
import logging

from staywindow.errors import (
    ComplianceError,
    InvalidConfigError,
    InvalidDateRangeError,
    InvalidReferenceDateError,
    InvalidStayError,
)
from staywindow.schemas import (
    CalculationMode,
    CompliantStart,
    DailyStatus,
    EngineConfig,
    ExpiringDay,
    ForecastResult,
    RiskLevel,
    SafeEntryInfo,
    Stay,
    TerritoryCheck,
)
from staywindow.services.presence import PresenceDaySet, build_presence_days
from staywindow.services.window import days_used_in_window, window_bounds
from staywindow.services.risk import classify
from staywindow.services.compliance import status_on
from staywindow.services.vector import compute_month, compute_vector, compute_year
from staywindow.services.forecast import forecast, forecast_upcoming, max_stay_days, what_if
from staywindow.services.safe_entry import (
    earliest_compliant_start,
    find_compliant_start,
    project_expiring_days,
    safe_entry_info,
)
from staywindow.services.territory import validate_territory

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ComplianceError",
    "InvalidConfigError",
    "InvalidDateRangeError",
    "InvalidReferenceDateError",
    "InvalidStayError",
    "CalculationMode",
    "CompliantStart",
    "DailyStatus",
    "EngineConfig",
    "ExpiringDay",
    "ForecastResult",
    "RiskLevel",
    "SafeEntryInfo",
    "Stay",
    "TerritoryCheck",
    "PresenceDaySet",
    "build_presence_days",
    "days_used_in_window",
    "window_bounds",
    "classify",
    "status_on",
    "compute_vector",
    "compute_month",
    "compute_year",
    "forecast",
    "forecast_upcoming",
    "max_stay_days",
    "what_if",
    "earliest_compliant_start",
    "find_compliant_start",
    "project_expiring_days",
    "safe_entry_info",
    "validate_territory",
]
