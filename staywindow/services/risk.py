"""Risk classifier: days remaining in the window to a green/amber/red tier."""
from staywindow.errors import InvalidConfigError
from staywindow.schemas.status import RiskLevel


def classify(days_remaining: int, amber_threshold_days: int = 15) -> RiskLevel:
    """red at or over the limit, amber within the threshold, green above it."""
    if amber_threshold_days < 0:
        raise InvalidConfigError("amber_threshold_days", "Amber threshold cannot be negative")
    if days_remaining <= 0:
        return RiskLevel.red
    if days_remaining <= amber_threshold_days:
        return RiskLevel.amber
    return RiskLevel.green


def describe(risk_level: RiskLevel) -> str:
    if risk_level == RiskLevel.green:
        return "Low risk - plenty of days remaining"
    if risk_level == RiskLevel.amber:
        return "Moderate risk - approaching limit"
    return "High risk - at or over limit"


def recommended_action(risk_level: RiskLevel, days_remaining: int) -> str:
    if risk_level == RiskLevel.green:
        return "Travel planning can proceed normally."
    if risk_level == RiskLevel.amber:
        return "Plan upcoming travel carefully. Consider spreading out visits."
    if days_remaining < 0:
        over = -days_remaining
        return f"Over limit by {over} day{'' if over == 1 else 's'}. Must remain outside until compliant."
    return "Limit reached. No further days may be spent in counted territories until days expire."
