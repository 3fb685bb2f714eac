"""Unit tests for batch strategies and progress models."""

import pytest

from places_enrichment.core.batch import (
    AsyncBatchStrategy,
    BatchResult,
    EnrichmentProgress,
    SequentialBatchStrategy,
)
from places_enrichment.tests.fakes import FakeInvoker, make_candidates


class TestEnrichmentProgress:
    """Test progress bookkeeping."""

    def test_start_resets_counters(self):
        progress = EnrichmentProgress(total=9, processed=9, errors=4)

        progress.start()

        assert (progress.total, progress.processed, progress.errors) == (0, 0, 0)
        assert progress.is_running is True
        assert progress.started_at is not None
        assert progress.finished_at is None

    def test_failure_moves_both_counters(self):
        progress = EnrichmentProgress(total=2)

        progress.record_success()
        progress.record_failure()

        assert (progress.processed, progress.errors) == (2, 1)

    def test_finish_clears_running_flag(self):
        progress = EnrichmentProgress()
        progress.start()

        progress.finish()

        assert progress.is_running is False
        assert progress.finished_at is not None

    def test_snapshot_is_detached(self):
        progress = EnrichmentProgress(total=3)
        snapshot = progress.snapshot()

        progress.record_success()

        assert snapshot.processed == 0
        assert progress.processed == 1


class TestBatchResult:
    def test_status(self):
        ok = BatchResult.create(0, successful=2, failed=0, processing_time=0.1234,
                                processing_mode="async_concurrent", results=[{}, {}])
        partial = BatchResult.create(1, successful=1, failed=1, processing_time=0.1,
                                     processing_mode="sequential", results=[{}, {}])

        assert ok.status == "completed"
        assert ok.size == 2
        assert ok.processing_time_seconds == 0.12
        assert partial.status == "completed_with_errors"


@pytest.mark.parametrize("strategy_cls", [AsyncBatchStrategy, SequentialBatchStrategy])
class TestStrategies:
    """Behavior shared by every strategy."""

    @pytest.mark.asyncio
    async def test_settles_every_candidate(self, strategy_cls):
        invoker = FakeInvoker(outcomes={"school-0": "raise", "school-1": "error"})
        progress = EnrichmentProgress(total=3, is_running=True)

        result = await strategy_cls().execute(0, make_candidates(3), invoker, progress)

        assert (result.successful, result.failed, result.size) == (1, 2, 3)
        assert (progress.processed, progress.errors) == (3, 2)
        statuses = {r["candidate_id"]: r["status"] for r in result.results}
        assert statuses == {"school-0": "error", "school-1": "error", "school-2": "success"}

    @pytest.mark.asyncio
    async def test_errors_are_reported(self, strategy_cls):
        invoker = FakeInvoker(outcomes={"school-0": "raise"})
        progress = EnrichmentProgress(total=1, is_running=True)

        result = await strategy_cls().execute(4, make_candidates(1), invoker, progress)

        assert result.batch_index == 4
        assert "edge function crashed" in result.results[0]["error"]


class TestAsyncStrategy:
    @pytest.mark.asyncio
    async def test_runs_batch_concurrently(self):
        invoker = FakeInvoker()
        progress = EnrichmentProgress(total=3, is_running=True)

        result = await AsyncBatchStrategy().execute(0, make_candidates(3), invoker, progress)

        assert invoker.max_in_flight == 3
        assert result.processing_mode == "async_concurrent"


class TestSequentialStrategy:
    @pytest.mark.asyncio
    async def test_runs_in_order_one_at_a_time(self):
        invoker = FakeInvoker()
        progress = EnrichmentProgress(total=3, is_running=True)

        result = await SequentialBatchStrategy().execute(0, make_candidates(3), invoker, progress)

        assert invoker.calls == ["school-0", "school-1", "school-2"]
        assert invoker.max_in_flight == 1
        assert result.processing_mode == "sequential"
