from staywindow.schemas.territory import TerritoryCheck, TerritoryInfo, TerritoryKind
from staywindow.schemas.stay import Stay
from staywindow.schemas.engine import CalculationMode, EngineConfig
from staywindow.schemas.status import (
    CompliantStart,
    DailyStatus,
    ExpiringDay,
    ForecastResult,
    RiskLevel,
    SafeEntryInfo,
)
