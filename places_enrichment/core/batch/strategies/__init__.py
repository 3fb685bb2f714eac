"""Batch processing strategies for places enrichment.

Strategy pattern implementation for different batch execution approaches.
"""

from places_enrichment.core.batch.strategies.async_strategy import AsyncBatchStrategy
from places_enrichment.core.batch.strategies.base import BatchStrategy
from places_enrichment.core.batch.strategies.sequential_strategy import SequentialBatchStrategy

__all__ = [
    "BatchStrategy",
    "AsyncBatchStrategy",
    "SequentialBatchStrategy",
]
