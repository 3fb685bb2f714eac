"""Shared fixtures for places enrichment tests."""

import pytest

from places_enrichment.core.batch import BatchEnricher
from places_enrichment.tests.fakes import (
    FakeCandidateRepository,
    FakeInvoker,
    SleepRecorder,
)


@pytest.fixture
def invoker():
    return FakeInvoker()


@pytest.fixture
def sleep_recorder(invoker):
    return SleepRecorder(invoker)


@pytest.fixture
def build_enricher(invoker, sleep_recorder):
    """Factory for a BatchEnricher wired to fakes."""

    def build(missing=None, stale=None, candidates=None, **kwargs):
        options = {
            "batch_size": 3,
            "batch_delay": 2.0,
            "stale_after_days": 7,
            "fetch_limit": 25,
            "processing_mode": "async",
            "sleep": sleep_recorder,
        }
        options.update(kwargs)
        enricher = BatchEnricher(
            candidates=candidates or FakeCandidateRepository(missing=missing, stale=stale),
            invoker=options.pop("invoker", invoker),
            **options,
        )
        enricher.invoker.enricher = enricher
        return enricher

    return build
