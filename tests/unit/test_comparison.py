"""Unit tests for feasibility scoring and trip ranking"""

import pytest
from datetime import date, timedelta
from trip_budget.domain.comparison import (
    comparison_inputs_for_trip,
    rank_stored_trips,
    rank_trips,
    score,
)
from trip_budget.domain.models import ComparisonInputs

TODAY = date(2026, 3, 1)


def test_score_no_adjustments():
    """Test affordable trip in the 6-12 month window keeps the base score"""
    assert score(ComparisonInputs(total_cost=2000, monthly_amount=300, months_to_target=10)) == 100


def test_score_worst_tiers():
    """Test 100 - 30 (monthly > 1000) - 20 (cost > 5000) - 20 (< 3 months)"""
    assert score(ComparisonInputs(total_cost=6000, monthly_amount=1200, months_to_target=2)) == 30


@pytest.mark.parametrize(
    "monthly_amount, expected",
    [(500, 100), (500.01, 85), (1000, 85), (1000.01, 70)],
)
def test_score_monthly_burden_tiers(monthly_amount, expected):
    """Test monthly burden thresholds are strict"""
    assert score(ComparisonInputs(total_cost=1000, monthly_amount=monthly_amount, months_to_target=8)) == expected


@pytest.mark.parametrize(
    "total_cost, expected",
    [(3000, 100), (3000.5, 90), (5000, 90), (5001, 80)],
)
def test_score_cost_tiers(total_cost, expected):
    """Test absolute cost thresholds are strict"""
    assert score(ComparisonInputs(total_cost=total_cost, monthly_amount=100, months_to_target=8)) == expected


@pytest.mark.parametrize(
    "months, expected",
    [(0, 80), (2, 80), (3, 90), (5, 90), (6, 100), (12, 100), (13, 100)],
)
def test_score_horizon_tiers(months, expected):
    """Test horizon tiers: penalties under 6 months, bonus beyond 12"""
    assert score(ComparisonInputs(total_cost=1000, monthly_amount=100, months_to_target=months)) == expected


def test_score_is_clamped():
    """Test bonus cannot push the score above 100 and penalties cannot go below 0"""
    assert score(ComparisonInputs(total_cost=100, monthly_amount=10, months_to_target=24)) == 100
    lowest = score(ComparisonInputs(total_cost=10**9, monthly_amount=10**9, months_to_target=0))
    assert lowest == 30
    assert 0 <= lowest <= 100


def test_score_no_date_gets_short_horizon_penalty():
    """Test known quirk: a trip without a date scores like one leaving within 3 months"""
    no_date = comparison_inputs_for_trip(400, None, TODAY)
    leaving_soon = comparison_inputs_for_trip(400, TODAY + timedelta(days=20), TODAY)

    assert no_date.months_to_target == 0
    assert no_date.monthly_amount == 0
    assert score(no_date) == 80
    assert score(leaving_soon) == 80


def test_comparison_inputs_for_trip():
    """Test monthly amount spread over 30-day months until the deadline"""
    inputs = comparison_inputs_for_trip(1200, TODAY + timedelta(days=100), TODAY)

    assert inputs.months_to_target == 4
    assert inputs.monthly_amount == 300


def test_comparison_inputs_past_deadline_counts_one_month():
    """Test a deadline already passed is not an error in the comparison view"""
    inputs = comparison_inputs_for_trip(900, TODAY - timedelta(days=40), TODAY)

    assert inputs.months_to_target == 1
    assert inputs.monthly_amount == 900


def test_rank_trips_descending_and_stable():
    """Test best score first, ties keep input order"""
    ranked = rank_trips(
        [
            ("a", "First tie", ComparisonInputs(2000, 300, 10)),
            ("b", "Worst", ComparisonInputs(6000, 1200, 2)),
            ("c", "Second tie", ComparisonInputs(1000, 100, 8)),
            ("d", "Middle", ComparisonInputs(4000, 600, 4)),
        ]
    )

    assert [r.trip_id for r in ranked] == ["a", "c", "d", "b"]
    assert [r.score for r in ranked] == [100, 100, 65, 30]


def test_rank_trips_empty():
    """Test no trips, no ranking"""
    assert rank_trips([]) == []


def test_rank_stored_trips(stored_trips, today):
    """Test stored trips use start date, then legacy target date"""
    ranked = rank_stored_trips(stored_trips, today)

    assert [r.trip_id for r in ranked] == ["trip_rome", "trip_nodate", "trip_japan"]
    assert [r.score for r in ranked] == [100, 80, 30]

    japan = ranked[2]
    assert japan.inputs.months_to_target == 2
    assert japan.inputs.monthly_amount == 3000
