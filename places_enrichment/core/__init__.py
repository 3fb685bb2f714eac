"""Core enrichment logic: batch orchestration, coverage statistics, errors and logging."""
