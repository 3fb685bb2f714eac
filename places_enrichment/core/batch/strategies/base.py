"""Base batch processing strategy for places enrichment.

Defines strategy interface following Strategy pattern (Open/Closed principle).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from places_enrichment.core.batch.models import BatchResult, EnrichmentProgress
from places_enrichment.core.errors import ErrorClassifier
from places_enrichment.core.logging import logger
from places_enrichment.infrastructure.database.models import EnrichmentCandidate
from places_enrichment.infrastructure.functions import EnrichmentInvoker


class BatchStrategy(ABC):
    """Abstract base class for batch processing strategies.

    Different strategies implement different execution approaches:
    - AsyncBatchStrategy: Uses asyncio.gather() for concurrent execution
    - SequentialBatchStrategy: Processes candidates one by one (fallback)

    Every strategy settles every candidate: a failure is recorded and never
    stops the rest of the batch.
    """

    @abstractmethod
    async def execute(
        self,
        batch_index: int,
        candidates: List[EnrichmentCandidate],
        invoker: EnrichmentInvoker,
        progress: EnrichmentProgress,
    ) -> BatchResult:
        """Execute one batch using this strategy.

        Args:
            batch_index: Zero-based position of the batch in the run
            candidates: Candidates in this batch
            invoker: Enrichment function invoker
            progress: Shared run progress, updated as each candidate settles

        Returns:
            BatchResult with execution summary and results
        """
        pass

    async def process_candidate(
        self,
        batch_index: int,
        candidate: EnrichmentCandidate,
        invoker: EnrichmentInvoker,
        progress: EnrichmentProgress,
    ) -> Dict[str, Any]:
        """Enrich one candidate and record the outcome on progress."""
        try:
            result = await invoker.invoke(candidate)
        except Exception as e:
            progress.record_failure()
            logger.warning(
                "candidate_enrichment_error",
                batch_index=batch_index,
                candidate_id=candidate.id,
                error=str(e),
                error_category=ErrorClassifier.categorize(e).value,
            )
            return {"candidate_id": candidate.id, "status": "error", "error": str(e)}

        if not result.success:
            progress.record_failure()
            logger.warning(
                "candidate_enrichment_failed",
                batch_index=batch_index,
                candidate_id=candidate.id,
                error=result.error,
                error_category=ErrorClassifier.categorize_message(result.error or "").value,
            )
            return {"candidate_id": candidate.id, "status": "error", "error": result.error}

        progress.record_success()
        logger.debug("candidate_enriched", batch_index=batch_index, candidate_id=candidate.id)
        return {"candidate_id": candidate.id, "status": "success", "error": None}
