"""Unit tests for StatsReporter."""

import pytest

from places_enrichment.core.stats import EnrichmentStats, StatsReporter
from places_enrichment.tests.fakes import FakeCandidateRepository, FakeEnrichedRepository


class TestEnrichmentStats:
    """Test percentage computation."""

    def test_zero_total_gives_zero_percent(self):
        assert EnrichmentStats.compute(0, 0) == EnrichmentStats(0, 0, 0)

    def test_zero_total_with_enriched_rows(self):
        assert EnrichmentStats.compute(0, 4).percentage == 0

    @pytest.mark.parametrize(
        "total,enriched,expected",
        [(3, 2, 67), (8, 1, 13), (200, 29, 15), (4, 4, 100), (3, 1, 33)],
    )
    def test_percentage_rounds_half_up(self, total, enriched, expected):
        assert EnrichmentStats.compute(total, enriched).percentage == expected


class TestStatsReporter:
    """Test coverage reporting against the store."""

    @pytest.mark.asyncio
    async def test_get_stats(self):
        reporter = StatsReporter(
            candidates=FakeCandidateRepository(eligible=120),
            enriched=FakeEnrichedRepository(count=90),
        )

        stats = await reporter.get_stats()

        assert stats == EnrichmentStats(total=120, enriched=90, percentage=75)
        assert stats.to_dict() == {"total": 120, "enriched": 90, "percentage": 75}

    @pytest.mark.asyncio
    async def test_empty_store(self):
        reporter = StatsReporter(
            candidates=FakeCandidateRepository(eligible=0),
            enriched=FakeEnrichedRepository(count=0),
        )

        stats = await reporter.get_stats()

        assert stats.percentage == 0

    @pytest.mark.asyncio
    async def test_candidate_count_failure_returns_zeros(self):
        reporter = StatsReporter(
            candidates=FakeCandidateRepository(error=RuntimeError("JWT expired")),
            enriched=FakeEnrichedRepository(count=10),
        )

        assert await reporter.get_stats() == EnrichmentStats(0, 0, 0)

    @pytest.mark.asyncio
    async def test_enriched_count_failure_returns_zeros(self):
        reporter = StatsReporter(
            candidates=FakeCandidateRepository(eligible=10),
            enriched=FakeEnrichedRepository(error=RuntimeError("relation does not exist")),
        )

        assert await reporter.get_stats() == EnrichmentStats(0, 0, 0)
