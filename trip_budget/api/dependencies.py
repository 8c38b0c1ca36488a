"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Request
from trip_budget.infrastructure.clients.trip_store import TripStoreClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Reference date for every savings horizon"""
    return date.today()


def get_trip_store_client() -> TripStoreClient:
    """Provide hosted trip database client instance"""
    return TripStoreClient()
