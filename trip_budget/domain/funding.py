"""Funding planner - savings rate and projected funding date for a trip"""

import math
from datetime import date
from typing import Optional

from trip_budget.domain.exceptions import InvalidDateError
from trip_budget.domain.models import (
    FundedOn,
    FundingInputs,
    FundingProjection,
    FundingResult,
    Horizon,
    KnownHorizon,
    NeverFunded,
    UndefinedHorizon,
)
from trip_budget.utils.date_utils import add_months, days_between, months_from_days

DEFAULT_SLIDER_MAX = 2000.0
FALLBACK_PLAN_MONTHS = 12
FALLBACK_ROUNDING = 10

# Ratios within this distance of an integer are treated as that integer before
# rounding up, so that a rate derived from cost / months maps back to months.
# Trade-off: a ratio above an integer by less than 5e-10 rounds down, which can
# leave up to 5e-10 of a month's contribution uncovered.
_RATIO_PRECISION = 9


def funding_horizon(departure_date: Optional[date], today: date) -> Horizon:
    """
    Months left before departure.

    Raises:
        InvalidDateError: departure_date is before today
    """
    if departure_date is None:
        return UndefinedHorizon()

    days_until = days_between(today, departure_date)
    if days_until < 0:
        raise InvalidDateError(departure_date, today)

    return KnownHorizon(months=months_from_days(days_until), days=days_until)


def suggested_monthly(
    total_cost: float,
    passengers: int,
    slider_max: float = DEFAULT_SLIDER_MAX,
) -> float:
    """
    Starting per-person rate when there is no departure date.

    Roughly a 12-month plan, rounded up to the next 10:
        2400 for 2 people → 2400 / 2 / 12 = 100 → 100
        1000 for 1 person → 83.33 → 90
    """
    if total_cost <= 0:
        return 0.0

    per_month = total_cost / max(1, passengers) / FALLBACK_PLAN_MONTHS
    rounded = math.ceil(per_month / FALLBACK_ROUNDING) * FALLBACK_ROUNDING
    return float(min(rounded, slider_max))


def project_funding(total_cost: float, monthly_total: float, today: date) -> FundingProjection:
    """
    When the trip is paid for when saving monthly_total every month.

    A rate so small that the month count is not finite counts as never
    funded. A finite count whose date lies past date.max keeps the months
    but has no funding date.
    """
    if monthly_total <= 0:
        return NeverFunded()

    ratio = round(total_cost / monthly_total, _RATIO_PRECISION)
    if not math.isfinite(ratio):
        return NeverFunded()

    months = math.ceil(ratio)
    try:
        funding_date = add_months(today, months)
    except OverflowError:
        funding_date = None
    return FundedOn(months=months, funding_date=funding_date)


def plan(
    inputs: FundingInputs,
    today: date,
    chosen_monthly_per_person: Optional[float] = None,
    slider_max: float = DEFAULT_SLIDER_MAX,
) -> FundingResult:
    """
    Build the savings plan for a trip.

    Requirements:
    - Required rate = total cost spread over the months left before departure
    - Chosen rate = override, else required rate, else 12-month fallback
    - Zero chosen rate means the trip is never funded (no division by zero)
    - Passenger count is floored at 1 in every division

    Args:
        inputs: Total cost, passengers and optional departure date
        today: Reference date for every horizon computation
        chosen_monthly_per_person: User override (already parsed), None to use defaults
        slider_max: Upper bound for the fallback suggestion

    Raises:
        InvalidDateError: departure date is before today

    Example:
        1200 for 2 people, departure in 90 days →
        3 months, 400/month total, 200/month per person
    """
    passengers = max(1, inputs.passengers)
    horizon = funding_horizon(inputs.departure_date, today)

    required_total: Optional[float] = None
    required_per_person: Optional[float] = None
    if isinstance(horizon, KnownHorizon):
        required_total = inputs.total_cost / horizon.months if inputs.total_cost > 0 else 0.0
        required_per_person = required_total / passengers

    if chosen_monthly_per_person is not None:
        chosen_per_person = chosen_monthly_per_person
    elif required_per_person is not None:
        chosen_per_person = required_per_person
    else:
        chosen_per_person = suggested_monthly(inputs.total_cost, passengers, slider_max)

    chosen_total = chosen_per_person * passengers

    return FundingResult(
        horizon=horizon,
        projection=project_funding(inputs.total_cost, chosen_total, today),
        required_monthly_total=required_total,
        required_monthly_per_person=required_per_person,
        chosen_monthly_per_person=chosen_per_person,
        chosen_monthly_total=chosen_total,
        departure_date=inputs.departure_date,
    )


def recommended_minimum(result: FundingResult) -> Optional[int]:
    """Per-person rate applied by "use recommended minimum", rounded up to a whole unit"""
    if result.required_monthly_per_person is None:
        return None
    return math.ceil(round(result.required_monthly_per_person, _RATIO_PRECISION))
