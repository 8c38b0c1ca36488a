"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient
from trip_budget.api.main import create_app
from trip_budget.api.dependencies import get_today
from trip_budget.domain.models import StoredTrip

FIXED_TODAY = date(2026, 3, 1)


@pytest.fixture
def today() -> date:
    """Pinned reference date"""
    return FIXED_TODAY


@pytest.fixture
def client(today: date) -> TestClient:
    """Create FastAPI test client with a pinned today"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: today
    return TestClient(app)


@pytest.fixture
def stored_trips(today: date) -> list[StoredTrip]:
    """Saved trips as returned by the trip store"""
    return [
        # No date at all: zero horizon
        StoredTrip(
            trip_id="trip_nodate",
            name="Someday Lisbon",
            flight_cost=300,
            accommodation_cost=400,
            additional_expenses=100,
            passengers=2,
            cities=["Lisbon"],
        ),
        # Expensive and soon
        StoredTrip(
            trip_id="trip_japan",
            name="Japan next month",
            flight_cost=3000,
            accommodation_cost=2500,
            additional_expenses=500,
            passengers=2,
            start_date=today + timedelta(days=45),
            cities=["Tokyo", "Kyoto"],
        ),
        # Cheap and far away, legacy target_date only
        StoredTrip(
            trip_id="trip_rome",
            name="Rome next year",
            flight_cost=400,
            accommodation_cost=800,
            additional_expenses=200,
            passengers=1,
            target_date=today + timedelta(days=400),
            cities=["Rome"],
        ),
    ]
