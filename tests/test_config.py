"""Tests for library settings."""

import pytest
from pydantic import ValidationError

from solartime.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SOLARTIME_MIDNIGHT_SEARCH_DAYS", raising=False)
        monkeypatch.delenv("SOLARTIME_IERS_AUTO_DOWNLOAD", raising=False)
        settings = Settings(_env_file=None)

        assert settings.midnight_search_days == 2
        assert settings.iers_auto_download is False

    def test_from_environment(self, monkeypatch):
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("SOLARTIME_MIDNIGHT_SEARCH_DAYS", "5")
        monkeypatch.setenv("SOLARTIME_IERS_AUTO_DOWNLOAD", "true")
        settings = Settings(_env_file=None)

        assert settings.midnight_search_days == 5
        assert settings.iers_auto_download is True

    @pytest.mark.parametrize("value", ["1", "8", "-3"])
    def test_search_days_out_of_range(self, monkeypatch, value):
        monkeypatch.setenv("SOLARTIME_MIDNIGHT_SEARCH_DAYS", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same object until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first
