"""POST /v1/funding/plan - Savings plan for a trip"""

import math
import time
import logging
from datetime import date
from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException, BackgroundTasks, Request

from trip_budget.api.v1.schemas import FundingPlanRequest, FundingPlanResponse
from trip_budget.api.v1.trips import build_trip_costs, to_costs_response
from trip_budget.api.dependencies import get_request_id, get_today, get_trip_store_client
from trip_budget.config import settings
from trip_budget.domain.exceptions import InvalidDateError, TripNotFoundError, TripStoreError
from trip_budget.domain.funding import plan, recommended_minimum
from trip_budget.domain.models import FundingInputs, FundingResult
from trip_budget.domain.money import parse_override
from trip_budget.infrastructure.clients.trip_store import TripStoreClient
from trip_budget.infrastructure.observability.metrics import record_funding_plan, invalid_date_counter
from trip_budget.infrastructure.observability.logging import log_funding_plan

router = APIRouter()


def funding_fields(result: FundingResult) -> Dict[str, Any]:
    """Funding figures retained on the saved trip"""
    months = result.months_needed_at_chosen_rate
    funding_date = result.projected_funding_date
    return {
        "monthly_saving_per_person": result.chosen_monthly_per_person,
        "monthly_saving_total": result.chosen_monthly_total,
        "funding_months_est": months if math.isfinite(months) else None,
        "funding_date_est": funding_date.isoformat() if funding_date else None,
    }


async def persist_funding(store: TripStoreClient, trip_id: str, fields: Dict[str, Any], request_id: str) -> None:
    """Background write of the funding figures; failures are logged, the plan is already returned"""
    try:
        await store.save_funding(trip_id, fields)
    except (TripStoreError, TripNotFoundError) as e:
        logging.error(f"Failed to save funding for trip {trip_id}: {e}", extra={"request_id": request_id})


@router.post("/funding/plan", response_model=FundingPlanResponse)
async def create_funding_plan(
    request_body: FundingPlanRequest,
    background_tasks: BackgroundTasks,
    request: Request,
    today: date = Depends(get_today),
    store: TripStoreClient = Depends(get_trip_store_client),
):
    """
    Compute the savings plan for a trip.

    Flow:
    1. Parse raw cost fields and compute total cost
    2. Derive required monthly rate from the departure date (if any)
    3. Project funding date at the chosen (or default) monthly rate
    4. Write the retained figures back to the saved trip, if trip_id is given
    5. Return the plan
    """
    start_time = time.time()
    request_id = get_request_id(request)

    costs = build_trip_costs(request_body)
    inputs = FundingInputs(
        total_cost=costs.total,
        passengers=costs.passengers,
        departure_date=request_body.departure_date,
    )

    try:
        result = plan(
            inputs,
            today,
            chosen_monthly_per_person=parse_override(request_body.monthly_per_person),
            slider_max=settings.savings_slider_max,
        )
    except InvalidDateError as e:
        invalid_date_counter.inc()
        logging.warning(f"Invalid departure date: {e}", extra={"request_id": request_id})
        raise HTTPException(
            status_code=422,
            detail={
                "error": "invalid_departure_date",
                "message": str(e),
                "costs": to_costs_response(request_body, costs).model_dump(),
            },
        )

    if request_body.trip_id:
        background_tasks.add_task(
            persist_funding, store, request_body.trip_id, funding_fields(result), request_id
        )

    months_needed = result.months_needed_at_chosen_rate
    finite_months = months_needed if math.isfinite(months_needed) else None

    duration_ms = (time.time() - start_time) * 1000
    record_funding_plan(result.feasible_before_departure)
    log_funding_plan(
        request_id,
        costs.passengers,
        result.months_until_departure,
        finite_months,
        result.feasible_before_departure,
        duration_ms,
    )

    return FundingPlanResponse(
        costs=to_costs_response(request_body, costs),
        departure_date=result.departure_date,
        months_until_departure=result.months_until_departure,
        required_monthly_total=result.required_monthly_total,
        required_monthly_per_person=result.required_monthly_per_person,
        recommended_minimum=recommended_minimum(result),
        chosen_monthly_per_person=result.chosen_monthly_per_person,
        chosen_monthly_total=result.chosen_monthly_total,
        months_needed=finite_months,
        never_funded=finite_months is None,
        projected_funding_date=result.projected_funding_date,
        feasible_before_departure=result.feasible_before_departure,
    )
