"""
Shared fixtures for the StayWindow test suite.

Dates are written as ISO strings in tests and turned into ``date`` objects here, so every
scenario reads like the calendar it describes.
"""
from datetime import date

import pytest

from staywindow.schemas import CalculationMode, EngineConfig, Stay

CUTOVER = date(2025, 10, 12)


def d(value: str) -> date:
    return date.fromisoformat(value)


@pytest.fixture
def make_stay():
    def _make(entry: str, exit: str | None = None, territory: str = "FR", **kwargs) -> Stay:
        return Stay(
            entry_date=d(entry),
            exit_date=d(exit) if exit else None,
            territory=territory,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_config():
    def _make(reference: str | None = "2026-01-15", **overrides) -> EngineConfig:
        values = {
            "mode": CalculationMode.audit,
            "reference_date": d(reference) if reference else None,
            "effective_start_date": CUTOVER,
        }
        values.update(overrides)
        return EngineConfig(**values)

    return _make


@pytest.fixture
def config(make_config) -> EngineConfig:
    return make_config()


@pytest.fixture
def planning_config(make_config) -> EngineConfig:
    return make_config(mode=CalculationMode.planning)
