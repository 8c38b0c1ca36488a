"""Trip comparison endpoints - rank trips by feasibility score"""

import logging
from datetime import date
from typing import Dict, List
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from trip_budget.api.v1.schemas import CompareRequest, CompareResponse, RankedTripSchema
from trip_budget.api.dependencies import get_request_id, get_today, get_trip_store_client
from trip_budget.domain.comparison import rank_trips, rank_stored_trips
from trip_budget.domain.exceptions import TripStoreError
from trip_budget.domain.models import ComparisonInputs, RankedTrip
from trip_budget.infrastructure.clients.trip_store import TripStoreClient
from trip_budget.infrastructure.observability.metrics import record_scores, trip_store_fetch_failures_counter
from trip_budget.infrastructure.observability.logging import log_trip_comparison

router = APIRouter()


def to_ranked_schemas(ranked: List[RankedTrip], cities: Dict[str, List[str]] | None = None) -> List[RankedTripSchema]:
    cities = cities or {}
    return [
        RankedTripSchema(
            trip_id=r.trip_id,
            name=r.name,
            total_cost=r.inputs.total_cost,
            monthly_amount=r.inputs.monthly_amount,
            months_to_target=r.inputs.months_to_target,
            score=r.score,
            cities=cities.get(r.trip_id, []),
        )
        for r in ranked
    ]


def _record(request_id: str, ranked: List[RankedTrip]) -> None:
    record_scores(r.score for r in ranked)
    best = ranked[0] if ranked else None
    log_trip_comparison(
        request_id,
        len(ranked),
        best.trip_id if best else None,
        best.score if best else None,
    )


@router.post("/trips/compare", response_model=CompareResponse)
def compare_trips(request_body: CompareRequest, request: Request):
    """
    Rank explicitly supplied trips by feasibility score, best first.

    Ties keep the order in which trips were sent.
    """
    ranked = rank_trips(
        (
            t.trip_id,
            t.name,
            ComparisonInputs(
                total_cost=t.total_cost,
                monthly_amount=t.monthly_amount,
                months_to_target=t.months_to_target,
            ),
        )
        for t in request_body.trips
    )
    _record(get_request_id(request), ranked)

    return CompareResponse(
        trips=to_ranked_schemas(ranked),
        best_trip_id=ranked[0].trip_id if ranked else None,
    )


@router.get("/trips/comparison", response_model=CompareResponse)
async def compare_saved_trips(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    today: date = Depends(get_today),
    store: TripStoreClient = Depends(get_trip_store_client),
):
    """
    Rank a user's saved trips.

    Monthly amount and horizon are derived from each trip's departure (or
    legacy target) date; trips without a date score with a zero horizon.
    """
    request_id = get_request_id(request)

    try:
        trips = await store.list_trips(user_id)
    except TripStoreError as e:
        trip_store_fetch_failures_counter.inc()
        logging.error(f"Trip store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Trip store unavailable")

    ranked = rank_stored_trips(trips, today)
    _record(request_id, ranked)

    return CompareResponse(
        user_id=user_id,
        trips=to_ranked_schemas(ranked, {t.trip_id: t.cities for t in trips}),
        best_trip_id=ranked[0].trip_id if ranked else None,
    )
