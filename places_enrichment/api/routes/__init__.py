"""Routes for places enrichment."""

from places_enrichment.api.routes import enrichment, system

__all__ = ["enrichment", "system"]
