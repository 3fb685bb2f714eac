"""Repository implementations for places enrichment.

Implements Repository pattern with Dependency Inversion principle.
"""

from places_enrichment.infrastructure.database.repositories.base import BaseRepository
from places_enrichment.infrastructure.database.repositories.candidates import CandidateRepository
from places_enrichment.infrastructure.database.repositories.enriched import (
    EnrichedRecordRepository,
)

__all__ = [
    "BaseRepository",
    "CandidateRepository",
    "EnrichedRecordRepository",
]
