"""Configuration management for places enrichment.

Centralizes all environment variable access for better testability and maintainability.
"""

import os
from typing import Optional


class Config:
    """Application configuration loaded from environment variables."""

    # Supabase configuration
    @staticmethod
    def supabase_url() -> Optional[str]:
        """Get Supabase project URL from environment."""
        return os.environ.get("SUPABASE_URL")

    @staticmethod
    def supabase_key() -> Optional[str]:
        """Get Supabase key, preferring the service role key over the anon key."""
        return os.environ.get("SUPABASE_SERVICE_ROLE_KEY") or os.environ.get("SUPABASE_ANON_KEY")

    # Enrichment function
    @staticmethod
    def enrichment_function() -> str:
        """Get the name of the Edge Function that enriches a single record."""
        return os.environ.get("ENRICHMENT_FUNCTION_NAME", "google-places-enricher")

    # Batch processing
    @staticmethod
    def batch_size() -> int:
        """Number of candidates dispatched concurrently per batch."""
        return int(os.environ.get("ENRICHMENT_BATCH_SIZE", "3"))

    @staticmethod
    def batch_delay_seconds() -> float:
        """Pause between consecutive batches."""
        return float(os.environ.get("ENRICHMENT_BATCH_DELAY_SECONDS", "2.0"))

    @staticmethod
    def stale_after_days() -> int:
        """Age after which enrichment data is refreshed."""
        return int(os.environ.get("ENRICHMENT_STALE_AFTER_DAYS", "7"))

    @staticmethod
    def fetch_limit() -> int:
        """Maximum rows returned by each candidate query."""
        return int(os.environ.get("ENRICHMENT_FETCH_LIMIT", "25"))

    @staticmethod
    def processing_mode() -> str:
        """Batch strategy name ('async' or 'sequential')."""
        return os.environ.get("ENRICHMENT_PROCESSING_MODE", "async")

    # Tables
    @staticmethod
    def candidates_table() -> str:
        """Table holding the location records to enrich."""
        return os.environ.get("CANDIDATES_TABLE", "Förskolor")

    @staticmethod
    def enriched_table() -> str:
        """Table holding enrichment results, keyed by candidate id."""
        return os.environ.get("ENRICHED_TABLE", "preschool_google_data")

    # Logging
    @staticmethod
    def log_level() -> str:
        return os.environ.get("LOG_LEVEL", "INFO").upper()

    # Helper methods
    @staticmethod
    def is_configured() -> bool:
        """Check if all required configuration is present."""
        return all([
            Config.supabase_url(),
            Config.supabase_key(),
        ])

    @staticmethod
    def get_missing_config() -> list[str]:
        """Get list of missing required configuration keys."""
        missing = []
        if not Config.supabase_url():
            missing.append("SUPABASE_URL")
        if not Config.supabase_key():
            missing.append("SUPABASE_SERVICE_ROLE_KEY or SUPABASE_ANON_KEY")
        return missing


# Singleton instance for easy access
config = Config()
