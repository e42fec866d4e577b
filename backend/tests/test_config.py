"""Tests for settings and logging setup."""

import logging

from reddit.config import Settings
from reddit.logging_config import configure_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Should default to an in-memory database and page size 10."""
        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///:memory:"
        assert settings.default_page_size == 10
        assert settings.is_production is False

    def test_reads_environment(self, monkeypatch):
        """Should pick up overrides from the environment."""
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.default_page_size == 25
        assert settings.is_production is True


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_debug_forces_debug_level(self, monkeypatch):
        """Should configure DEBUG when debug is on."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

        configure_logging(Settings(_env_file=None, debug=True))

        assert calls["level"] == logging.DEBUG

    def test_uses_configured_level(self, monkeypatch):
        """Should pass the configured level through."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

        configure_logging(Settings(_env_file=None, log_level="warning"))

        assert calls["level"] == "WARNING"
