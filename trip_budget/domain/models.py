"""Domain models - pure Python dataclasses representing trip budgeting entities"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union


@dataclass
class DestinationStop:
    """One stop of a trip itinerary"""

    city: str
    country: str
    has_lodging: bool = False
    nights: int = 0
    price_per_night: float = 0.0


@dataclass
class TripCosts:
    """Cost breakdown of a trip"""

    flight: float
    accommodation: float
    additional: float
    passengers: int
    total: float
    per_person: float


@dataclass
class FundingInputs:
    """What the funding planner needs to know about a trip"""

    total_cost: float
    passengers: int
    departure_date: Optional[date] = None


@dataclass(frozen=True)
class UndefinedHorizon:
    """No departure date, so no minimum savings rate can be derived"""


@dataclass(frozen=True)
class KnownHorizon:
    """Time left before departure, in 30-day months"""

    months: int
    days: int


Horizon = Union[UndefinedHorizon, KnownHorizon]


@dataclass(frozen=True)
class NeverFunded:
    """Chosen savings rate is zero (or vanishingly small), the trip is never funded"""


@dataclass(frozen=True)
class FundedOn:
    """Trip is fully funded after `months` of saving; no date when it falls past date.max"""

    months: int
    funding_date: Optional[date]


FundingProjection = Union[NeverFunded, FundedOn]


@dataclass
class FundingResult:
    """Output of the funding planner"""

    horizon: Horizon
    projection: FundingProjection
    required_monthly_total: Optional[float]
    required_monthly_per_person: Optional[float]
    chosen_monthly_per_person: float
    chosen_monthly_total: float
    departure_date: Optional[date] = None

    @property
    def months_until_departure(self) -> Optional[int]:
        if isinstance(self.horizon, KnownHorizon):
            return self.horizon.months
        return None

    @property
    def months_needed_at_chosen_rate(self) -> Union[int, float]:
        if isinstance(self.projection, FundedOn):
            return self.projection.months
        return math.inf

    @property
    def projected_funding_date(self) -> Optional[date]:
        if isinstance(self.projection, FundedOn):
            return self.projection.funding_date
        return None

    @property
    def feasible_before_departure(self) -> Optional[bool]:
        if self.departure_date is None:
            return None
        funding_date = self.projected_funding_date
        return funding_date is not None and funding_date <= self.departure_date


@dataclass
class ComparisonInputs:
    """Per-trip figures used to rank trips"""

    total_cost: float
    monthly_amount: float
    months_to_target: int


@dataclass
class StoredTrip:
    """Trip row read from the hosted trip database"""

    trip_id: str
    name: str
    flight_cost: float
    accommodation_cost: float
    additional_expenses: float
    passengers: int
    start_date: Optional[date] = None
    target_date: Optional[date] = None
    cities: List[str] = field(default_factory=list)

    @property
    def total_cost(self) -> float:
        return self.flight_cost + self.accommodation_cost + self.additional_expenses


@dataclass
class RankedTrip:
    """Trip with its feasibility score"""

    trip_id: str
    name: str
    inputs: ComparisonInputs
    score: int
