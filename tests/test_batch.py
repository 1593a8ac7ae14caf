"""
Tests for the batch sweep. Thread workers keep the tests quick; the process pool runs the same tasks.
"""
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from datetime import date

import pytest

from staywindow.services.batch import _make_executor, sweep_forecasts, sweep_statuses
from staywindow.services.compliance import status_on

d = date.fromisoformat


@pytest.fixture
def subjects(make_stay):
    return {
        "alice": [make_stay("2025-11-01", "2025-11-30"), make_stay("2026-02-01", "2026-02-05", "IT")],
        "bob": [make_stay("2025-10-12", "2026-01-09")],
        "carol": [],
        "dave": [make_stay("2026-03-10", "2026-03-01")],  # exit before entry
    }


def test_status_sweep(subjects, config):
    result = sweep_statuses(subjects, config, max_workers=2, use_processes=False)
    assert set(result.statuses) == {"alice", "bob", "carol"}
    assert set(result.errors) == {"dave"}
    assert "end (2026-03-01) is before start (2026-03-10)" in result.errors["dave"]
    for name, status in result.statuses.items():
        assert status == status_on(subjects[name], config)
    assert result.statuses["bob"].days_used == 90
    assert result.statuses["carol"].days_used == 0


def test_forecast_sweep(subjects, make_config):
    config = make_config("2026-01-15")
    result = sweep_forecasts(subjects, config, max_workers=2, use_processes=False)
    assert set(result.errors) == {"dave"}
    assert [f.entry_date for f in result.forecasts["alice"]] == [d("2026-02-01")]
    assert result.forecasts["alice"][0].days_used_before_trip == 30
    assert result.forecasts["bob"] == []


def test_empty_sweep(config):
    result = sweep_statuses({}, config)
    assert result.statuses == {}
    assert result.errors == {}


def test_executor_selection():
    with _make_executor(2, False) as executor:
        assert isinstance(executor, ThreadPoolExecutor)
    with _make_executor(2, True) as executor:
        assert isinstance(executor, ProcessPoolExecutor)


def test_status_sweep_on_process_pool(subjects, config):
    result = sweep_statuses(subjects, config, max_workers=1, use_processes=True)
    assert set(result.statuses) == {"alice", "bob", "carol"}
    assert set(result.errors) == {"dave"}
    assert result.statuses["bob"] == status_on(subjects["bob"], config)
