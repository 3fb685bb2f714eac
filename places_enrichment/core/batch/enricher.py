"""Batch enricher for places enrichment.

Main orchestrator: selects candidates, splits them into fixed-size batches,
runs each batch through a strategy and pauses between batches.
"""

import asyncio
import threading
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Iterator, List, Optional, Sequence

from places_enrichment.config import config
from places_enrichment.core.batch.models import BatchResult, EnrichmentProgress
from places_enrichment.core.batch.strategies import (
    AsyncBatchStrategy,
    BatchStrategy,
    SequentialBatchStrategy,
)
from places_enrichment.core.errors import CandidateFetchError
from places_enrichment.core.logging import logger
from places_enrichment.infrastructure.database.models import EnrichmentCandidate
from places_enrichment.infrastructure.database.repositories import CandidateRepository
from places_enrichment.infrastructure.functions import EnrichmentInvoker

Sleep = Callable[[float], Awaitable[None]]


def partition(
    candidates: Sequence[EnrichmentCandidate], size: int
) -> Iterator[List[EnrichmentCandidate]]:
    """Yield consecutive batches of at most size candidates."""
    if size < 1:
        raise ValueError(f"batch size must be positive, got {size}")
    for start in range(0, len(candidates), size):
        yield list(candidates[start:start + size])


def deduplicate(candidates: Sequence[EnrichmentCandidate]) -> List[EnrichmentCandidate]:
    """Drop repeated candidate ids, keeping the first occurrence."""
    seen = set()
    unique = []
    for candidate in candidates:
        if candidate.id in seen:
            continue
        seen.add(candidate.id)
        unique.append(candidate)
    return unique


class BatchEnricher:
    """Orchestrates one enrichment pass over candidates needing enrichment data.

    Only one run can be in flight per instance. Progress is owned here and
    exposed to callers as snapshots.

    Example:
        >>> enricher = BatchEnricher()
        >>> await enricher.run()
        >>> enricher.progress.processed
    """

    def __init__(
        self,
        candidates: Optional[CandidateRepository] = None,
        invoker: Optional[EnrichmentInvoker] = None,
        batch_size: Optional[int] = None,
        batch_delay: Optional[float] = None,
        stale_after_days: Optional[int] = None,
        fetch_limit: Optional[int] = None,
        processing_mode: Optional[str] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        """Initialize batch enricher.

        Args:
            candidates: CandidateRepository (defaults to a new instance)
            invoker: EnrichmentInvoker (defaults to a new instance)
            batch_size: Candidates per batch. Defaults to config.batch_size()
            batch_delay: Seconds between batches. Defaults to config.batch_delay_seconds()
            stale_after_days: Refresh threshold. Defaults to config.stale_after_days()
            fetch_limit: Row limit per candidate query. Defaults to config.fetch_limit()
            processing_mode: 'async' or 'sequential'. Defaults to config.processing_mode()
            sleep: Coroutine used for the inter-batch pause
        """
        self.candidates = candidates or CandidateRepository()
        self.invoker = invoker or EnrichmentInvoker()
        self.batch_size = batch_size if batch_size is not None else config.batch_size()
        self.batch_delay = batch_delay if batch_delay is not None else config.batch_delay_seconds()
        self.stale_after_days = (
            stale_after_days if stale_after_days is not None else config.stale_after_days()
        )
        self.fetch_limit = fetch_limit if fetch_limit is not None else config.fetch_limit()
        self._sleep = sleep

        # Register available strategies
        self.strategies = {
            "async": AsyncBatchStrategy(),
            "sequential": SequentialBatchStrategy(),
        }
        self.strategy = self._select_strategy(processing_mode or config.processing_mode())

        self._progress = EnrichmentProgress()
        self._run_lock = threading.Lock()

    @property
    def progress(self) -> EnrichmentProgress:
        """Read-only view of the current progress."""
        return self._progress.snapshot()

    @property
    def is_running(self) -> bool:
        return self._run_lock.locked()

    def _select_strategy(self, mode: str) -> BatchStrategy:
        if mode not in self.strategies:
            raise ValueError(
                f"Unknown processing mode '{mode}'. Expected one of: {sorted(self.strategies)}"
            )
        return self.strategies[mode]

    def try_start(self) -> bool:
        """Claim the run guard without waiting.

        Returns True if the caller now owns the run and must follow up with
        run_claimed(), which releases the guard. Returns False if a run is
        already in flight.
        """
        # Non-blocking acquire is the atomic check-and-set for re-entry
        return self._run_lock.acquire(blocking=False)

    async def run(self) -> None:
        """Run one enrichment pass.

        Returns immediately if a run is already in flight. Never raises:
        failures are logged and reflected in progress.
        """
        if not self.try_start():
            logger.info("enrichment_run_skipped", reason="already_running")
            return

        await self.run_claimed()

    async def run_claimed(self) -> None:
        """Run the pass for a guard already claimed with try_start()."""
        try:
            self._progress.start()
            logger.info("enrichment_run_started")

            try:
                candidates = await self._fetch_candidates()
            except CandidateFetchError as e:
                logger.error("enrichment_fetch_failed", query=e.query, error=str(e.cause))
                return

            self._progress.total = len(candidates)
            logger.info("candidates_fetched", total=len(candidates))

            await self._process(candidates)

            logger.info(
                "enrichment_run_completed",
                total=self._progress.total,
                processed=self._progress.processed,
                errors=self._progress.errors,
            )

        except Exception as e:
            logger.error("enrichment_run_failed", error=str(e), exc_info=True)
        finally:
            self._progress.finish()
            self._run_lock.release()

    async def _fetch_candidates(self) -> List[EnrichmentCandidate]:
        """Fetch candidates without enrichment data, then those with stale data.

        Raises:
            CandidateFetchError: If any store query fails
        """
        cutoff = datetime.now(timezone.utc) - timedelta(days=self.stale_after_days)

        missing = await asyncio.to_thread(self.candidates.fetch_missing, self.fetch_limit)
        stale = await asyncio.to_thread(self.candidates.fetch_stale, cutoff, self.fetch_limit)

        combined = missing + stale
        unique = deduplicate(combined)
        if len(unique) != len(combined):
            logger.info("duplicate_candidates_dropped", dropped=len(combined) - len(unique))

        logger.debug("candidate_sources", missing=len(missing), stale=len(stale))
        return unique

    async def _process(self, candidates: List[EnrichmentCandidate]) -> List[BatchResult]:
        """Run every batch in order with a pause between consecutive batches."""
        batches = list(partition(candidates, self.batch_size))
        results = []

        for index, batch in enumerate(batches):
            result = await self.strategy.execute(index, batch, self.invoker, self._progress)
            results.append(result)

            logger.info(
                "enrichment_batch_completed",
                batch_index=index,
                batches=len(batches),
                status=result.status,
                successful=result.successful,
                failed=result.failed,
                processed=self._progress.processed,
                total=self._progress.total,
            )

            if index < len(batches) - 1:
                await self._sleep(self.batch_delay)

        return results
