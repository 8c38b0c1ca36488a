"""Trip cost breakdown from flight, lodging and extra expenses"""

from typing import Dict, Iterable, Literal

from trip_budget.domain.models import DestinationStop, TripCosts

LodgingMode = Literal["global", "per_stop"]


def accommodation_cost(
    lodging_mode: LodgingMode,
    global_amount: float = 0.0,
    destinations: Iterable[DestinationStop] = (),
) -> float:
    """
    Accommodation total for either lodging mode.

    - "global": one amount for the whole trip
    - "per_stop": sum of nights × price_per_night over stops with lodging

    The modes are exclusive: the input of the other mode is ignored.
    """
    if lodging_mode == "global":
        return max(0.0, global_amount)

    return sum(
        max(0, stop.nights) * max(0.0, stop.price_per_night)
        for stop in destinations
        if stop.has_lodging
    )


def compute_trip_costs(
    flight: float,
    additional: float,
    passengers: int,
    lodging_mode: LodgingMode = "global",
    accommodation: float = 0.0,
    destinations: Iterable[DestinationStop] = (),
) -> TripCosts:
    """Total and per-person cost of a trip"""
    flight = max(0.0, flight)
    additional = max(0.0, additional)
    lodging = accommodation_cost(lodging_mode, accommodation, destinations)

    total = flight + lodging + additional
    return TripCosts(
        flight=flight,
        accommodation=lodging,
        additional=additional,
        passengers=passengers,
        total=total,
        per_person=total / max(1, passengers),
    )


def expense_shares(costs: TripCosts) -> Dict[str, float]:
    """Percentage of the total taken by each expense category"""
    if costs.total <= 0:
        return {}

    return {
        "flight": costs.flight / costs.total * 100,
        "accommodation": costs.accommodation / costs.total * 100,
        "additional": costs.additional / costs.total * 100,
    }


def lodging_complete(destinations: Iterable[DestinationStop]) -> bool:
    """Every stop with lodging has both a night count and a nightly price"""
    return all(
        stop.nights > 0 and stop.price_per_night > 0
        for stop in destinations
        if stop.has_lodging
    )
