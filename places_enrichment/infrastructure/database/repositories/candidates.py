"""Candidate repository for places enrichment.

Selects location records that need enrichment and counts eligible records.
Both selections join the enriched table as an embedded resource, so the
exclusion and staleness filters run in the database.
"""

from datetime import datetime
from typing import List

from places_enrichment.config import config
from places_enrichment.core.errors import CandidateFetchError
from places_enrichment.core.logging import logger
from places_enrichment.infrastructure.database.models import (
    CANDIDATE_COLUMNS,
    ENRICHED_KEY_COLUMN,
    ENRICHED_UPDATED_COLUMN,
    LATITUDE_COLUMN,
    LONGITUDE_COLUMN,
    EnrichmentCandidate,
)
from places_enrichment.infrastructure.database.repositories.base import BaseRepository


class CandidateRepository(BaseRepository[EnrichmentCandidate]):
    """Repository for the candidates table (records with a known location)."""

    def table_name(self) -> str:
        """Return table name."""
        return config.candidates_table()

    def _located(self, columns: str, **select_options):
        """Select from the table, restricted to rows with latitude and longitude."""
        return (
            self.db.table(self.table_name())
            .select(columns, **select_options)
            .not_.is_(LATITUDE_COLUMN, "null")
            .not_.is_(LONGITUDE_COLUMN, "null")
        )

    def fetch_missing(self, limit: int) -> List[EnrichmentCandidate]:
        """Fetch located records that have no enrichment data yet.

        Left-joins the enriched table and keeps rows where the join is empty.

        Args:
            limit: Maximum number of rows to return

        Returns:
            List of EnrichmentCandidate

        Raises:
            CandidateFetchError: If the query fails
        """
        enriched = config.enriched_table()
        columns = f"{CANDIDATE_COLUMNS}, {enriched}!left({ENRICHED_KEY_COLUMN})"

        try:
            result = (
                self._located(columns)
                .is_(enriched, "null")
                .limit(limit)
                .execute()
            )
        except Exception as e:
            raise CandidateFetchError("missing_data", e) from e

        candidates = [EnrichmentCandidate.from_row(row) for row in result.data or []]
        logger.debug("missing_candidates_fetched", count=len(candidates))
        return candidates

    def fetch_stale(self, cutoff: datetime, limit: int) -> List[EnrichmentCandidate]:
        """Fetch located records whose enrichment data was last updated before cutoff.

        Args:
            cutoff: Timezone-aware staleness threshold
            limit: Maximum number of rows to return

        Returns:
            List of EnrichmentCandidate

        Raises:
            CandidateFetchError: If the query fails
        """
        enriched = config.enriched_table()
        columns = f"{CANDIDATE_COLUMNS}, {enriched}!inner({ENRICHED_UPDATED_COLUMN})"

        try:
            result = (
                self._located(columns)
                .lt(f"{enriched}.{ENRICHED_UPDATED_COLUMN}", cutoff.isoformat())
                .limit(limit)
                .execute()
            )
        except Exception as e:
            raise CandidateFetchError("stale_data", e) from e

        candidates = [EnrichmentCandidate.from_row(row) for row in result.data or []]
        logger.debug("stale_candidates_fetched", count=len(candidates))
        return candidates

    def count_eligible(self) -> int:
        """Count records with a known location.

        Raises:
            Exception: Propagates store errors to the caller
        """
        result = self._located("id", count="exact").limit(1).execute()
        if result.count is not None:
            return result.count
        return len(result.data or [])
