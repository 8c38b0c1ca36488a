"""Hosted trip database client (PostgREST-style REST API)"""

import asyncio
import httpx
from datetime import date
from typing import Any, Dict, List, Optional
from trip_budget.domain.models import StoredTrip
from trip_budget.domain.exceptions import TripStoreError, TripNotFoundError
from trip_budget.config import settings
from trip_budget.infrastructure.observability.metrics import (
    trip_store_write_latency_histogram,
    trip_store_write_failure_counter,
)

TRIP_COLUMNS = (
    "id,name,flight_cost,accommodation_cost,additional_expenses,passengers,"
    "start_date,target_date,trip_destinations(city,order_index)"
)


def _parse_date(value: Optional[str]) -> Optional[date]:
    return date.fromisoformat(value[:10]) if value else None


def _to_stored_trip(row: Dict[str, Any]) -> StoredTrip:
    destinations = sorted(row.get("trip_destinations") or [], key=lambda d: d.get("order_index", 0))
    return StoredTrip(
        trip_id=str(row["id"]),
        name=row["name"],
        flight_cost=float(row.get("flight_cost") or 0),
        accommodation_cost=float(row.get("accommodation_cost") or 0),
        additional_expenses=float(row.get("additional_expenses") or 0),
        passengers=int(row.get("passengers") or 1),
        start_date=_parse_date(row.get("start_date")),
        target_date=_parse_date(row.get("target_date")),
        cities=[d["city"] for d in destinations if d.get("city")],
    )


class TripStoreClient:
    """Client for the hosted trip database"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.trip_store_url
        self.api_key = api_key if api_key is not None else settings.trip_store_api_key
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_retries = settings.store_write_max_retries
        self.backoff_base = settings.store_write_backoff_base
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {"apikey": self.api_key}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def list_trips(self, user_id: str) -> List[StoredTrip]:
        """
        Fetch a user's saved trips with their destinations, newest first.

        Raises:
            TripStoreError: On timeout, HTTP errors, or invalid response
        """
        async with self._client() as client:
            try:
                response = await client.get(
                    "/trips",
                    params={
                        "select": TRIP_COLUMNS,
                        "user_id": f"eq.{user_id}",
                        "order": "created_at.desc",
                    },
                )
                response.raise_for_status()
                return [_to_stored_trip(row) for row in response.json()]

            except httpx.TimeoutException as e:
                raise TripStoreError(f"Trip store timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise TripStoreError(f"Trip store error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise TripStoreError(f"Trip store unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise TripStoreError(f"Invalid trip data from store: {e}") from e

    async def save_funding(self, trip_id: str, fields: Dict[str, Any]) -> None:
        """
        Write the retained funding figures back to a trip.

        Retry strategy:
        - Exponential backoff: base, 2×base, 4×base, ... (base × 2^(attempt-1))
        - Retries on 5xx errors and network failures, 4xx fails immediately
        - Tracks latency histogram and failure counter

        Raises:
            TripNotFoundError: No trip matched trip_id
            TripStoreError: Rejected by the store or retries exhausted
        """
        attempt = 0
        async with self._client() as client:
            while True:
                try:
                    with trip_store_write_latency_histogram.time():
                        response = await client.patch(
                            "/trips",
                            params={"id": f"eq.{trip_id}"},
                            json=fields,
                            headers={"Prefer": "return=representation"},
                        )
                        response.raise_for_status()

                    try:
                        updated = response.json()
                    except ValueError as e:
                        trip_store_write_failure_counter.inc()
                        raise TripStoreError(f"Invalid update response from store: {e}") from e

                    if not updated:
                        raise TripNotFoundError(f"Trip {trip_id} not found")
                    return

                except (httpx.HTTPStatusError, httpx.RequestError) as e:
                    attempt += 1
                    trip_store_write_failure_counter.inc()

                    if isinstance(e, httpx.HTTPStatusError) and e.response.status_code < 500:
                        raise TripStoreError(f"Trip store rejected update: {e.response.status_code}") from e

                    if attempt >= self.max_retries:
                        raise TripStoreError(f"Trip store update failed after {attempt} attempts") from e

                    backoff = self.backoff_base * (2 ** (attempt - 1))
                    await asyncio.sleep(backoff)
