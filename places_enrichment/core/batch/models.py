"""Batch processing models for places enrichment.

Type-safe models for run progress and per-batch results.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class EnrichmentProgress:
    """Progress of the current (or last) enrichment run.

    Owned by BatchEnricher. Callers only ever see copies from snapshot().
    """

    total: int = 0
    processed: int = 0
    errors: int = 0
    is_running: bool = False
    started_at: Optional[str] = None
    finished_at: Optional[str] = None

    def start(self) -> None:
        """Reset counters and mark the run as started."""
        self.total = 0
        self.processed = 0
        self.errors = 0
        self.is_running = True
        self.started_at = _utcnow()
        self.finished_at = None

    def record_success(self) -> None:
        self.processed += 1

    def record_failure(self) -> None:
        # Both counters move together so errors never exceeds processed
        self.processed += 1
        self.errors += 1

    def finish(self) -> None:
        """Clear the running flag."""
        self.is_running = False
        self.finished_at = _utcnow()

    def snapshot(self) -> "EnrichmentProgress":
        """Return a detached copy for external readers."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "processed": self.processed,
            "errors": self.errors,
            "is_running": self.is_running,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
        }


@dataclass
class BatchResult:
    """Result of processing one batch of candidates."""

    batch_index: int
    size: int
    successful: int
    failed: int
    processing_time_seconds: float
    processing_mode: str  # 'async_concurrent', 'sequential'
    results: List[Dict[str, Any]] = field(default_factory=list)
    timestamp: str = ""

    @property
    def status(self) -> str:
        return "completed" if self.failed == 0 else "completed_with_errors"

    @classmethod
    def create(
        cls,
        batch_index: int,
        successful: int,
        failed: int,
        processing_time: float,
        processing_mode: str,
        results: List[Dict[str, Any]],
    ) -> "BatchResult":
        """Factory method to create BatchResult with auto-generated timestamp."""
        return cls(
            batch_index=batch_index,
            size=len(results),
            successful=successful,
            failed=failed,
            processing_time_seconds=round(processing_time, 2),
            processing_mode=processing_mode,
            results=results,
            timestamp=_utcnow(),
        )
