"""Enrichment routes: trigger a batch pass, read progress and coverage."""

from fastapi import APIRouter, BackgroundTasks, Depends

from places_enrichment.api.dependencies import get_enricher, get_stats_reporter
from places_enrichment.api.models import ProgressResponse, RunResponse, StatsResponse
from places_enrichment.core.batch import BatchEnricher
from places_enrichment.core.logging import logger
from places_enrichment.core.stats import StatsReporter

router = APIRouter(prefix="/enrichment", tags=["Enrichment"])


@router.get("/progress", response_model=ProgressResponse)
async def get_progress(enricher: BatchEnricher = Depends(get_enricher)):
    """Progress of the current or last run."""
    return ProgressResponse.from_progress(enricher.progress)


@router.post("/run", response_model=RunResponse, status_code=202)
async def start_run(
    background_tasks: BackgroundTasks,
    enricher: BatchEnricher = Depends(get_enricher),
):
    """Start an enrichment pass in the background.

    A request made while a run is in flight does not start another one.
    """
    started = enricher.try_start()
    if started:
        background_tasks.add_task(enricher.run_claimed)
        logger.info("enrichment_run_scheduled")

    return RunResponse(started=started, progress=ProgressResponse.from_progress(enricher.progress))


@router.get("/stats", response_model=StatsResponse)
async def get_stats(reporter: StatsReporter = Depends(get_stats_reporter)):
    """Coverage of enrichment data over eligible records."""
    stats = await reporter.get_stats()
    return StatsResponse.from_stats(stats)
