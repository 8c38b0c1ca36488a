"""Prometheus metrics for monitoring funding plans, trip scores and trip store calls"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Funding plan metrics
funding_plan_counter = Counter(
    "trip_funding_plan_total",
    "Funding plans computed",
    ["outcome"],  # feasible | infeasible | no_departure
)

invalid_date_counter = Counter(
    "trip_funding_invalid_date_total",
    "Funding plans rejected because departure date is in the past",
)

# Comparison metrics
feasibility_score_histogram = Histogram(
    "trip_feasibility_score",
    "Feasibility scores of compared trips",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Trip store metrics
trip_store_fetch_failures_counter = Counter(
    "trip_store_fetch_failures_total",
    "Failed trip store reads",
)

trip_store_write_latency_histogram = Histogram(
    "trip_store_write_latency_seconds",
    "Trip store write response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

trip_store_write_failure_counter = Counter(
    "trip_store_write_failures_total",
    "Failed trip store write attempts",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_funding_plan(feasible: Optional[bool]) -> None:
    """Record funding plan outcome for monitoring how often plans fit before departure"""
    if feasible is None:
        outcome = "no_departure"
    else:
        outcome = "feasible" if feasible else "infeasible"
    funding_plan_counter.labels(outcome=outcome).inc()


def record_scores(scores) -> None:
    """Record the distribution of feasibility scores"""
    for value in scores:
        feasibility_score_histogram.observe(value)
