"""Infrastructure modules for places enrichment.

- Database: Supabase client singleton and repository pattern
- Functions: Edge Function invocation
- Health: Dependency health checks
"""

from places_enrichment.infrastructure.database import (
    BaseRepository,
    CandidateRepository,
    EnrichedRecordRepository,
    EnrichmentCandidate,
    SupabaseClient,
)
from places_enrichment.infrastructure.functions import EnrichmentInvoker, InvocationResult
from places_enrichment.infrastructure.health import get_health_status, test_supabase_connection

__all__ = [
    # Database
    "SupabaseClient",
    "EnrichmentCandidate",
    "BaseRepository",
    "CandidateRepository",
    "EnrichedRecordRepository",
    # Functions
    "EnrichmentInvoker",
    "InvocationResult",
    # Health
    "test_supabase_connection",
    "get_health_status",
]
