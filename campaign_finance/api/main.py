"""FastAPI application factory"""

from typing import Optional

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from campaign_finance.api.middleware import RequestIDMiddleware, MetricsMiddleware
from campaign_finance.api.v1 import funding
from campaign_finance.infrastructure.cache import RecordCache
from campaign_finance.infrastructure.clients.record_source import RecordSource, default_record_source
from campaign_finance.infrastructure.observability.logging import setup_logging
from campaign_finance.infrastructure.repository import FundingDataRepository
from campaign_finance.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(
    source: Optional[RecordSource] = None,
    cache: Optional[RecordCache] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    The record source and cache are app-scoped and injectable; each app
    instance gets its own cache unless one is passed in.
    """
    app = FastAPI(
        title="Campaign Finance Gateway",
        description="FEC bulk-data parsing and funding analytics service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.repository = FundingDataRepository(
        source=source or default_record_source(),
        cache=cache or RecordCache(ttl_seconds=settings.cache_ttl_seconds),
        cycle=settings.cycle,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(funding.router, prefix="/v1", tags=["funding"])

    return app


app = create_app()
