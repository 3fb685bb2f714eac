"""System routes for places enrichment."""

from datetime import datetime, timezone

from fastapi import APIRouter

from places_enrichment.infrastructure.health import get_health_status

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check():
    """Health check with Supabase testing."""
    status = await get_health_status()
    status["timestamp"] = datetime.now(timezone.utc).isoformat()
    return status
