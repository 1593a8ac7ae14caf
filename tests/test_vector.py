"""
Tests for the sliding-window vector engine.

The direct window counter is the oracle: for every date in the range the vector entry must
match an independent count at that date.
"""
from datetime import date, timedelta

import pytest

from staywindow.errors import InvalidDateRangeError, InvalidReferenceDateError
from staywindow.schemas import CalculationMode
from staywindow.services.presence import build_presence_days
from staywindow.services.risk import classify
from staywindow.services.vector import compute_month, compute_vector, compute_year
from staywindow.services.window import days_used_in_window

d = date.fromisoformat


@pytest.fixture
def history(make_stay):
    return [
        make_stay("2025-09-20", "2025-10-20"),  # straddles the cutover
        make_stay("2025-11-03", "2025-11-03", "IT"),
        make_stay("2025-11-10", "2025-12-05", "ES"),
        make_stay("2025-11-20", "2025-11-25", "DE"),  # overlaps the previous one
        make_stay("2025-12-20", "2025-12-28", "IE"),  # not counted
        make_stay("2026-01-15", "2026-03-30", "PT"),
        make_stay("2026-05-01", "2026-05-02", "CH", excluded=True),
        make_stay("2026-06-10"),  # ongoing
    ]


@pytest.mark.parametrize("mode", list(CalculationMode))
@pytest.mark.parametrize("window_size", [1, 7, 180])
def test_vector_matches_direct_count_every_day(history, make_config, mode, window_size):
    config = make_config("2026-07-01", mode=mode, window_size=window_size)
    start, end = d("2025-09-01"), d("2026-12-31")

    vector = compute_vector(history, start, end, config)
    presence = build_presence_days(history, config)

    assert len(vector) == (end - start).days + 1
    for offset, status in enumerate(vector):
        day = start + timedelta(days=offset)
        assert status.date == day
        assert status.days_used == days_used_in_window(presence, day, config), day
        assert status.days_remaining == config.day_limit - status.days_used
        assert status.risk_level == classify(status.days_remaining, config.amber_threshold_days)


def test_vector_starting_mid_history_matches(history, make_config):
    config = make_config("2026-07-01", mode=CalculationMode.planning)
    vector = compute_vector(history, d("2026-02-14"), d("2026-04-30"), config)
    presence = build_presence_days(history, config)
    assert [s.days_used for s in vector] == [
        days_used_in_window(presence, s.date, config) for s in vector
    ]


def test_single_day_range(make_stay, config):
    vector = compute_vector([make_stay("2025-11-01", "2025-11-10")], d("2025-11-05"), d("2025-11-05"), config)
    assert len(vector) == 1
    assert vector[0].days_used == 5


def test_inverted_range_is_rejected_before_any_work(make_stay, config):
    # The stay is invalid too; the range check must win
    bad = make_stay("2025-11-10", "2025-11-01")
    with pytest.raises(InvalidDateRangeError):
        compute_vector([bad], d("2025-12-02"), d("2025-12-01"), config)


def test_missing_bounds_are_rejected(config):
    with pytest.raises(InvalidReferenceDateError):
        compute_vector([], None, d("2025-12-01"), config)


def test_missing_reference_is_rejected(make_config):
    with pytest.raises(InvalidReferenceDateError):
        compute_vector([], d("2025-12-01"), d("2025-12-31"), make_config(None))


def test_month_and_year_ranges(make_stay, make_config):
    config = make_config("2026-12-31", mode=CalculationMode.planning)
    stays = [make_stay("2024-02-01", "2024-02-29")]
    february = compute_month(stays, 2024, 2, config)
    assert len(february) == 29
    assert february[-1].date == d("2024-02-29")
    assert len(compute_year(stays, 2024, config)) == 366
    assert len(compute_year(stays, 2025, config)) == 365


def test_invalid_month_is_rejected(config):
    with pytest.raises(InvalidReferenceDateError):
        compute_month([], 2025, 13, config)


def test_vector_is_deterministic(history, make_config):
    config = make_config("2026-07-01")
    first = compute_vector(history, d("2025-10-01"), d("2026-09-30"), config)
    second = compute_vector(history, d("2025-10-01"), d("2026-09-30"), config)
    assert first == second


def test_expiry_visible_in_vector(make_stay, make_config):
    config = make_config("2026-06-01")
    vector = compute_vector([make_stay("2025-10-12", "2025-10-21")], d("2026-04-08"), d("2026-04-22"), config)
    used = {s.date: s.days_used for s in vector}
    assert used[d("2026-04-09")] == 10
    assert used[d("2026-04-10")] == 9
    assert used[d("2026-04-18")] == 1
    assert used[d("2026-04-19")] == 0
    assert used[d("2026-04-21")] == 0
