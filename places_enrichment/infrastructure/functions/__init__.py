"""Remote enrichment function access."""

from places_enrichment.infrastructure.functions.invoker import EnrichmentInvoker, InvocationResult

__all__ = ["EnrichmentInvoker", "InvocationResult"]
