"""Async batch processing strategy for places enrichment.

Uses asyncio.gather() for concurrent execution of enrichments.
"""

import asyncio
import time
from typing import List

from places_enrichment.core.batch.models import BatchResult, EnrichmentProgress
from places_enrichment.core.batch.strategies.base import BatchStrategy
from places_enrichment.core.logging import logger
from places_enrichment.infrastructure.database.models import EnrichmentCandidate
from places_enrichment.infrastructure.functions import EnrichmentInvoker


class AsyncBatchStrategy(BatchStrategy):
    """Async concurrent batch processing strategy.

    All candidates of a batch are in flight at once; the batch completes
    when every call has settled.
    """

    async def execute(
        self,
        batch_index: int,
        candidates: List[EnrichmentCandidate],
        invoker: EnrichmentInvoker,
        progress: EnrichmentProgress,
    ) -> BatchResult:
        start_time = time.time()

        logger.debug(
            "async_batch_started",
            batch_index=batch_index,
            size=len(candidates),
            strategy="async_concurrent",
        )

        # process_candidate never raises, so gather waits for every call
        results = await asyncio.gather(
            *[
                self.process_candidate(batch_index, candidate, invoker, progress)
                for candidate in candidates
            ]
        )

        successful_count = sum(1 for r in results if r.get("status") == "success")
        error_count = sum(1 for r in results if r.get("status") == "error")

        return BatchResult.create(
            batch_index=batch_index,
            successful=successful_count,
            failed=error_count,
            processing_time=time.time() - start_time,
            processing_mode="async_concurrent",
            results=list(results),
        )
