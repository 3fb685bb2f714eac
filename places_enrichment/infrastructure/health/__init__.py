"""Health monitoring module for places enrichment."""

from places_enrichment.infrastructure.health.checks import test_supabase_connection
from places_enrichment.infrastructure.health.endpoints import get_health_status

__all__ = [
    "test_supabase_connection",
    "get_health_status",
]
