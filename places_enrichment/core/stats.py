"""Coverage statistics for places enrichment."""

import asyncio
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from places_enrichment.core.logging import logger
from places_enrichment.infrastructure.database.repositories import (
    CandidateRepository,
    EnrichedRecordRepository,
)


@dataclass(frozen=True)
class EnrichmentStats:
    """Share of eligible records that currently have enrichment data."""

    total: int
    enriched: int
    percentage: int

    @classmethod
    def compute(cls, total: int, enriched: int) -> "EnrichmentStats":
        """Build stats, rounding the percentage half up. Zero total gives 0%."""
        if total <= 0:
            return cls(total=total, enriched=enriched, percentage=0)
        percentage = int(math.floor(enriched * 100 / total + 0.5))
        return cls(total=total, enriched=enriched, percentage=percentage)

    @classmethod
    def empty(cls) -> "EnrichmentStats":
        return cls(total=0, enriched=0, percentage=0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class StatsReporter:
    """Reports enrichment coverage. Stateless across calls."""

    def __init__(
        self,
        candidates: Optional[CandidateRepository] = None,
        enriched: Optional[EnrichedRecordRepository] = None,
    ):
        self.candidates = candidates or CandidateRepository()
        self.enriched = enriched or EnrichedRecordRepository()

    async def get_stats(self) -> EnrichmentStats:
        """Query the store for fresh coverage numbers.

        Returns:
            EnrichmentStats, or all zeros if any query fails
        """
        try:
            total = await asyncio.to_thread(self.candidates.count_eligible)
            enriched = await asyncio.to_thread(self.enriched.count)
        except Exception as e:
            logger.error("enrichment_stats_failed", error=str(e))
            return EnrichmentStats.empty()

        stats = EnrichmentStats.compute(total, enriched)
        logger.debug("enrichment_stats_computed", **stats.to_dict())
        return stats
