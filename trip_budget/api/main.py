"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from trip_budget.api.middleware import RequestIDMiddleware, MetricsMiddleware
from trip_budget.api.v1 import comparison, funding, trips
from trip_budget.infrastructure.observability.logging import setup_logging
from trip_budget.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Trip Budget Gateway",
        description="Trip cost, savings plan and trip comparison service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(trips.router, prefix="/v1", tags=["trips"])
    app.include_router(funding.router, prefix="/v1", tags=["funding"])
    app.include_router(comparison.router, prefix="/v1", tags=["comparison"])

    return app


app = create_app()
