"""API models for places enrichment."""

from places_enrichment.api.models.responses import ProgressResponse, RunResponse, StatsResponse

__all__ = ["ProgressResponse", "RunResponse", "StatsResponse"]
