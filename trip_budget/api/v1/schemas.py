"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Dict, List, Literal, Optional, Union

# Form fields arrive either as JSON numbers or as the raw text the user typed
MoneyField = Union[float, str]


class DestinationSchema(BaseModel):
    """One itinerary stop as entered in the trip form"""

    city: str = ""
    country: str = ""
    has_lodging: bool = False
    nights: Union[int, str] = ""
    price_per_night: MoneyField = ""


class TripEstimateRequest(BaseModel):
    """Request body for POST /v1/trips/estimate"""

    flight_cost: MoneyField = ""
    accommodation_cost: MoneyField = ""
    additional_expenses: MoneyField = ""
    passengers: Union[int, str] = 1
    lodging_mode: Literal["global", "per_stop"] = "global"
    destinations: List[DestinationSchema] = Field(default_factory=list)


class TripCostsResponse(BaseModel):
    """Cost breakdown of a trip"""

    flight: float
    accommodation: float
    additional: float
    passengers: int
    total: float
    per_person: float
    shares: Dict[str, float]
    lodging_complete: bool


class FundingPlanRequest(TripEstimateRequest):
    """Request body for POST /v1/funding/plan"""

    departure_date: Optional[date] = None
    monthly_per_person: Optional[MoneyField] = Field(None, description="Monthly savings per person override")
    trip_id: Optional[str] = Field(None, description="Saved trip to write the funding figures back to")


class FundingPlanResponse(BaseModel):
    """Response for POST /v1/funding/plan"""

    costs: TripCostsResponse
    departure_date: Optional[date] = None
    months_until_departure: Optional[int] = None
    required_monthly_total: Optional[float] = None
    required_monthly_per_person: Optional[float] = None
    recommended_minimum: Optional[int] = None
    chosen_monthly_per_person: float
    chosen_monthly_total: float
    months_needed: Optional[int] = None
    never_funded: bool
    projected_funding_date: Optional[date] = None
    feasible_before_departure: Optional[bool] = None


class ComparisonTripSchema(BaseModel):
    """Comparison figures for one trip"""

    trip_id: str = Field(..., min_length=1)
    name: str = ""
    total_cost: float = Field(..., ge=0)
    monthly_amount: float = Field(..., ge=0)
    months_to_target: int = Field(..., ge=0)


class CompareRequest(BaseModel):
    """Request body for POST /v1/trips/compare"""

    trips: List[ComparisonTripSchema]


class RankedTripSchema(BaseModel):
    """Trip with its feasibility score"""

    trip_id: str
    name: str
    total_cost: float
    monthly_amount: float
    months_to_target: int
    score: int
    cities: List[str] = Field(default_factory=list)


class CompareResponse(BaseModel):
    """Response for trip comparison endpoints"""

    user_id: Optional[str] = None
    trips: List[RankedTripSchema]
    best_trip_id: Optional[str] = None
