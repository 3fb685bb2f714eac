"""FastAPI dependencies for places enrichment.

Dependency injection functions for route handlers.
"""

from fastapi import Request

from places_enrichment.core.batch import BatchEnricher
from places_enrichment.core.stats import StatsReporter


def get_enricher(request: Request) -> BatchEnricher:
    """Get the shared BatchEnricher from app state.

    Note:
        Set via create_app(); one enricher per app so the re-entry guard
        covers every request.
    """
    return request.app.state.enricher


def get_stats_reporter(request: Request) -> StatsReporter:
    """Get the StatsReporter from app state."""
    return request.app.state.stats_reporter
