"""
Tests for the risk classifier band boundaries.
"""
import pytest

from staywindow.errors import InvalidConfigError
from staywindow.schemas import RiskLevel
from staywindow.services.risk import classify, describe, recommended_action


@pytest.mark.parametrize(
    "remaining, expected",
    [
        (-20, RiskLevel.red),
        (-1, RiskLevel.red),
        (0, RiskLevel.red),
        (1, RiskLevel.amber),
        (15, RiskLevel.amber),
        (16, RiskLevel.green),
        (90, RiskLevel.green),
    ],
)
def test_default_bands(remaining, expected):
    assert classify(remaining) == expected


@pytest.mark.parametrize("used, expected", [(90, RiskLevel.red), (75, RiskLevel.amber), (74, RiskLevel.green)])
def test_bands_from_days_used(used, expected):
    assert classify(90 - used, 15) == expected


def test_custom_threshold():
    assert classify(30, 30) == RiskLevel.amber
    assert classify(31, 30) == RiskLevel.green
    assert classify(1, 0) == RiskLevel.green


def test_negative_threshold_is_rejected():
    with pytest.raises(InvalidConfigError):
        classify(10, -1)


def test_descriptions_and_actions():
    assert "Low risk" in describe(RiskLevel.green)
    assert "approaching" in describe(RiskLevel.amber)
    assert "Over limit by 1 day." in recommended_action(RiskLevel.red, -1)
    assert "Over limit by 5 days." in recommended_action(RiskLevel.red, -5)
    assert recommended_action(RiskLevel.red, 0).startswith("Limit reached")
