"""POST /v1/trips/estimate - Trip cost breakdown from raw form input"""

from fastapi import APIRouter

from trip_budget.api.v1.schemas import TripEstimateRequest, TripCostsResponse
from trip_budget.domain.costs import compute_trip_costs, expense_shares, lodging_complete
from trip_budget.domain.models import DestinationStop, TripCosts
from trip_budget.domain.money import coerce_money, to_positive_int

router = APIRouter()


def to_destination_stops(request_body: TripEstimateRequest) -> list[DestinationStop]:
    """Parse the free-text lodging fields of each stop"""
    return [
        DestinationStop(
            city=d.city.strip(),
            country=d.country.strip(),
            has_lodging=d.has_lodging,
            nights=to_positive_int(str(d.nights), 0),
            price_per_night=coerce_money(d.price_per_night),
        )
        for d in request_body.destinations
    ]


def build_trip_costs(request_body: TripEstimateRequest) -> TripCosts:
    """Parse raw form input and compute the cost breakdown"""
    return compute_trip_costs(
        flight=coerce_money(request_body.flight_cost),
        additional=coerce_money(request_body.additional_expenses),
        passengers=to_positive_int(str(request_body.passengers), 1),
        lodging_mode=request_body.lodging_mode,
        accommodation=coerce_money(request_body.accommodation_cost),
        destinations=to_destination_stops(request_body),
    )


def to_costs_response(request_body: TripEstimateRequest, costs: TripCosts) -> TripCostsResponse:
    stops = to_destination_stops(request_body)
    return TripCostsResponse(
        flight=costs.flight,
        accommodation=costs.accommodation,
        additional=costs.additional,
        passengers=costs.passengers,
        total=costs.total,
        per_person=costs.per_person,
        shares=expense_shares(costs),
        lodging_complete=request_body.lodging_mode == "global" or lodging_complete(stops),
    )


@router.post("/trips/estimate", response_model=TripCostsResponse)
def estimate_trip(request_body: TripEstimateRequest):
    """
    Compute total and per-person cost of a trip.

    Money fields accept free text ("1.234,56", "€ 90"); unreadable values count as 0.
    """
    costs = build_trip_costs(request_body)
    return to_costs_response(request_body, costs)
