"""HTTP API for places enrichment."""

from places_enrichment.api.app import create_app

__all__ = ["create_app"]
