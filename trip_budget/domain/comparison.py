"""Feasibility scoring engine - ranks saved trips by affordability and time pressure"""

from datetime import date
from typing import Iterable, List, Optional, Tuple

from trip_budget.domain.models import ComparisonInputs, RankedTrip, StoredTrip
from trip_budget.utils.date_utils import days_between, months_from_days

MAX_SCORE = 100
MIN_SCORE = 0


def _monthly_burden_adjustment(monthly_amount: float) -> int:
    if monthly_amount > 1000:
        return -30
    elif monthly_amount > 500:
        return -15
    return 0


def _cost_adjustment(total_cost: float) -> int:
    if total_cost > 5000:
        return -20
    elif total_cost > 3000:
        return -10
    return 0


def _horizon_adjustment(months_to_target: int) -> int:
    if months_to_target < 3:
        return -20
    elif months_to_target < 6:
        return -10
    elif months_to_target > 12:
        return 10
    return 0


def score(inputs: ComparisonInputs) -> int:
    """
    Calculate feasibility score from 0 (hardest) to 100 (easiest).

    Additive model starting at 100:
    - Monthly burden: -30 above 1000/month, -15 above 500/month
    - Absolute cost: -20 above 5000, -10 above 3000
    - Horizon: -20 under 3 months, -10 under 6 months, +10 beyond 12 months

    A trip without a target date arrives with months_to_target = 0 and takes
    the -20 horizon penalty, same as a trip leaving very soon.
    """
    raw = (
        MAX_SCORE
        + _monthly_burden_adjustment(inputs.monthly_amount)
        + _cost_adjustment(inputs.total_cost)
        + _horizon_adjustment(inputs.months_to_target)
    )
    return max(MIN_SCORE, min(MAX_SCORE, raw))


def comparison_inputs_for_trip(
    total_cost: float,
    deadline: Optional[date],
    today: date,
) -> ComparisonInputs:
    """
    Derive monthly amount and horizon for a stored trip.

    Without a deadline both are 0. A deadline already passed still counts
    as one month: the comparison view never rejects a saved trip.
    """
    if deadline is None:
        return ComparisonInputs(total_cost=total_cost, monthly_amount=0.0, months_to_target=0)

    months = months_from_days(days_between(today, deadline))
    return ComparisonInputs(
        total_cost=total_cost,
        monthly_amount=total_cost / months,
        months_to_target=months,
    )


def rank_trips(trips: Iterable[Tuple[str, str, ComparisonInputs]]) -> List[RankedTrip]:
    """
    Score (trip_id, name, inputs) entries and sort best first.

    Ties keep their input order.
    """
    ranked = [
        RankedTrip(trip_id=trip_id, name=name, inputs=inputs, score=score(inputs))
        for trip_id, name, inputs in trips
    ]
    return sorted(ranked, key=lambda r: r.score, reverse=True)


def rank_stored_trips(trips: Iterable[StoredTrip], today: date) -> List[RankedTrip]:
    """Main entry point for the comparison view: rank trips read from the trip store"""
    return rank_trips(
        (
            trip.trip_id,
            trip.name,
            comparison_inputs_for_trip(trip.total_cost, trip.start_date or trip.target_date, today),
        )
        for trip in trips
    )
