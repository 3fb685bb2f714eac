"""FastAPI application factory for places enrichment."""

from typing import Optional

from fastapi import FastAPI

from places_enrichment.api.middleware import request_id_middleware
from places_enrichment.api.routes import enrichment, system
from places_enrichment.core.batch import BatchEnricher
from places_enrichment.core.stats import StatsReporter


def create_app(
    enricher: Optional[BatchEnricher] = None,
    stats_reporter: Optional[StatsReporter] = None,
) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability."""
    app = FastAPI(
        title="places-enrichment",
        description=(
            "Batch enrichment of location records through the Google Places "
            "Edge Function, with progress tracking and coverage statistics."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware
    app.middleware("http")(request_id_middleware)

    # Register routes
    app.include_router(system.router)
    app.include_router(enrichment.router)

    app.state.enricher = enricher or BatchEnricher()
    app.state.stats_reporter = stats_reporter or StatsReporter()

    return app
