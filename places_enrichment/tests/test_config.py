"""Unit tests for Config."""

from places_enrichment.config import Config

ENV_VARS = [
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "ENRICHMENT_FUNCTION_NAME",
    "ENRICHMENT_BATCH_SIZE",
    "ENRICHMENT_BATCH_DELAY_SECONDS",
    "ENRICHMENT_STALE_AFTER_DAYS",
    "ENRICHMENT_FETCH_LIMIT",
    "ENRICHMENT_PROCESSING_MODE",
]


class TestConfig:
    """Test environment-backed configuration."""

    def test_defaults(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

        assert Config.enrichment_function() == "google-places-enricher"
        assert Config.batch_size() == 3
        assert Config.batch_delay_seconds() == 2.0
        assert Config.stale_after_days() == 7
        assert Config.fetch_limit() == 25
        assert Config.processing_mode() == "async"
        assert Config.is_configured() is False
        assert Config.get_missing_config() == [
            "SUPABASE_URL",
            "SUPABASE_SERVICE_ROLE_KEY or SUPABASE_ANON_KEY",
        ]

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("ENRICHMENT_BATCH_SIZE", "5")
        monkeypatch.setenv("ENRICHMENT_BATCH_DELAY_SECONDS", "0.5")

        assert Config.batch_size() == 5
        assert Config.batch_delay_seconds() == 0.5

    def test_anon_key_fallback(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")

        assert Config.supabase_key() == "anon-key"
        assert Config.is_configured() is True

    def test_service_role_key_preferred(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-key")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")

        assert Config.supabase_key() == "service-key"
