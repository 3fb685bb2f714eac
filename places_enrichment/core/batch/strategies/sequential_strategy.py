"""Sequential batch processing strategy for places enrichment.

Processes candidates one by one. Fallback strategy when the enrichment
function should never see parallel calls.
"""

import time
from typing import List

from places_enrichment.core.batch.models import BatchResult, EnrichmentProgress
from places_enrichment.core.batch.strategies.base import BatchStrategy
from places_enrichment.core.logging import logger
from places_enrichment.infrastructure.database.models import EnrichmentCandidate
from places_enrichment.infrastructure.functions import EnrichmentInvoker


class SequentialBatchStrategy(BatchStrategy):
    """Sequential batch processing strategy."""

    async def execute(
        self,
        batch_index: int,
        candidates: List[EnrichmentCandidate],
        invoker: EnrichmentInvoker,
        progress: EnrichmentProgress,
    ) -> BatchResult:
        start_time = time.time()

        logger.debug(
            "sequential_batch_started",
            batch_index=batch_index,
            size=len(candidates),
            strategy="sequential",
        )

        results = []
        successful_count = 0
        error_count = 0

        for candidate in candidates:
            result = await self.process_candidate(batch_index, candidate, invoker, progress)
            results.append(result)
            if result["status"] == "success":
                successful_count += 1
            else:
                error_count += 1

        return BatchResult.create(
            batch_index=batch_index,
            successful=successful_count,
            failed=error_count,
            processing_time=time.time() - start_time,
            processing_mode="sequential",
            results=results,
        )
