"""
==============================================================================
Settings and Logging Tests
==============================================================================

Tests for configuration loading and logging setup.

==============================================================================
"""

import logging

import pytest
from pydantic import ValidationError

from catalog_store.config import Settings, get_settings
from catalog_store.utils import configure_logging


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        """Test default catalog limits."""
        settings = Settings()
        assert settings.max_search_results == 100
        assert settings.default_page_size == 20
        assert settings.log_level == "INFO"
        assert settings.is_development is True

    def test_env_override(self, monkeypatch):
        """Test CATALOG_ prefixed variables override defaults."""
        monkeypatch.setenv("CATALOG_MAX_SEARCH_RESULTS", "25")
        monkeypatch.setenv("CATALOG_APP_ENV", "Production")

        settings = Settings()
        assert settings.max_search_results == 25
        assert settings.is_production is True

    def test_unknown_env_falls_back(self):
        """Test unknown environment names become development."""
        assert Settings(app_env="qa").app_env == "development"

    @pytest.mark.parametrize("value", [0, -5, 10001])
    def test_max_search_results_bounds(self, value: int):
        """Test out-of-range search cap is rejected."""
        with pytest.raises(ValidationError):
            Settings(max_search_results=value)

    def test_log_level_normalized(self):
        """Test log level names are uppercased."""
        assert Settings(log_level="warning").log_level == "WARNING"

    def test_invalid_log_level(self):
        """Test unknown log level is rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_log_level_value(self):
        """Test numeric level honors debug flag."""
        assert Settings(log_level="ERROR").log_level_value == logging.ERROR
        assert Settings(log_level="ERROR", debug=True).log_level_value == logging.DEBUG

    def test_get_settings_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_configure_logging_sets_root_level(self, monkeypatch):
        """Test basicConfig receives configured level and format."""
        calls = {}

        def fake_basic_config(**kwargs):
            calls.update(kwargs)

        monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

        configure_logging(Settings(log_level="WARNING"))

        assert calls["level"] == logging.WARNING
        assert "%(levelname)s" in calls["format"]
