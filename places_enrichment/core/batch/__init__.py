"""Batch processing module for places enrichment.

Components:
- BatchEnricher: Main orchestrator
- EnrichmentProgress: Run progress owned by the enricher
- BatchResult: Per-batch result model
- BatchStrategy: Strategy interface
- AsyncBatchStrategy: Async concurrent execution
- SequentialBatchStrategy: Sequential execution fallback
"""

from places_enrichment.core.batch.enricher import BatchEnricher, deduplicate, partition
from places_enrichment.core.batch.models import BatchResult, EnrichmentProgress
from places_enrichment.core.batch.strategies import (
    AsyncBatchStrategy,
    BatchStrategy,
    SequentialBatchStrategy,
)

__all__ = [
    "BatchEnricher",
    "BatchResult",
    "EnrichmentProgress",
    "BatchStrategy",
    "AsyncBatchStrategy",
    "SequentialBatchStrategy",
    "deduplicate",
    "partition",
]
