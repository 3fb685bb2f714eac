"""Response models for the enrichment API."""

from typing import Optional

from pydantic import BaseModel, Field

from places_enrichment.core.batch.models import EnrichmentProgress
from places_enrichment.core.stats import EnrichmentStats


class ProgressResponse(BaseModel):
    """Current (or last) enrichment run progress."""

    total: int = Field(..., ge=0, description="Candidates selected for the run")
    processed: int = Field(..., ge=0, description="Candidates whose call has settled")
    errors: int = Field(..., ge=0, description="Settled candidates that failed")
    is_running: bool
    started_at: Optional[str] = None
    finished_at: Optional[str] = None

    @classmethod
    def from_progress(cls, progress: EnrichmentProgress) -> "ProgressResponse":
        return cls(**progress.to_dict())


class RunResponse(BaseModel):
    """Response for POST /enrichment/run."""

    started: bool = Field(..., description="False if a run was already in flight")
    progress: ProgressResponse


class StatsResponse(BaseModel):
    """Enrichment coverage."""

    total: int
    enriched: int
    percentage: int = Field(..., description="Rounded share of eligible records enriched")

    @classmethod
    def from_stats(cls, stats: EnrichmentStats) -> "StatsResponse":
        return cls(**stats.to_dict())

    model_config = {
        "json_schema_extra": {
            "examples": [{"total": 120, "enriched": 90, "percentage": 75}]
        }
    }
