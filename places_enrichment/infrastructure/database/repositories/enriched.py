"""Enriched records repository for places enrichment.

Reads the table the enrichment function writes to.
"""

from places_enrichment.config import config
from places_enrichment.infrastructure.database.models import ENRICHED_KEY_COLUMN
from places_enrichment.infrastructure.database.repositories.base import BaseRepository


class EnrichedRecordRepository(BaseRepository[str]):
    """Repository for the enriched records table."""

    def table_name(self) -> str:
        """Return table name."""
        return config.enriched_table()

    def count(self) -> int:
        """Count enriched records.

        Raises:
            Exception: Propagates store errors to the caller
        """
        result = (
            self.db.table(self.table_name())
            .select(ENRICHED_KEY_COLUMN, count="exact")
            .limit(1)
            .execute()
        )
        if result.count is not None:
            return result.count
        return len(result.data or [])
