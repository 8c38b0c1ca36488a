"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from trip_budget.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_funding_plan(
    request_id: str,
    passengers: int,
    months_until_departure: Optional[int],
    months_needed: Optional[int],
    feasible: Optional[bool],
    duration_ms: float,
) -> None:
    """Log structured funding plan outcome"""
    if feasible is None:
        outcome = "no_departure"
    else:
        outcome = "feasible" if feasible else "infeasible"

    logging.info(
        "Funding plan computed",
        extra={
            "request_id": request_id,
            "step": "funding_plan",
            "passengers": passengers,
            "months_until_departure": months_until_departure,
            "months_needed": months_needed,
            "feasibility_outcome": outcome,
            "duration_ms": duration_ms,
        },
    )


def log_trip_comparison(request_id: str, trip_count: int, best_trip_id: Optional[str], best_score: Optional[int]) -> None:
    """Log structured comparison outcome"""
    logging.info(
        "Trips ranked",
        extra={
            "request_id": request_id,
            "step": "trip_comparison",
            "trip_count": trip_count,
            "best_trip_id": best_trip_id,
            "best_score": best_score,
        },
    )
