"""Database module for places enrichment.

Provides Supabase client singleton and repository pattern for database operations.
"""

from places_enrichment.infrastructure.database.client import SupabaseClient
from places_enrichment.infrastructure.database.models import EnrichmentCandidate
from places_enrichment.infrastructure.database.repositories import (
    BaseRepository,
    CandidateRepository,
    EnrichedRecordRepository,
)

__all__ = [
    "SupabaseClient",
    "EnrichmentCandidate",
    "BaseRepository",
    "CandidateRepository",
    "EnrichedRecordRepository",
]
