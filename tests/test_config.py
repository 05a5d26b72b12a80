"""Tests for CLI settings."""

import os

import pytest
from pydantic import ValidationError

from pathologize.config import Settings, get_settings


class TestSettings:
    """Tests for environment-driven configuration."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PATHOLOGIZE_PATH_SEPARATOR", raising=False)
        monkeypatch.delenv("PATHOLOGIZE_LOG_LEVEL", raising=False)

        settings = Settings()

        assert settings.path_separator == os.sep
        assert settings.log_level == "WARNING"

    @pytest.mark.unit
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PATHOLOGIZE_PATH_SEPARATOR", "/")
        monkeypatch.setenv("PATHOLOGIZE_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.path_separator == "/"
        assert settings.log_level == "DEBUG"

    @pytest.mark.unit
    def test_empty_separator_falls_back_to_host(self, monkeypatch):
        monkeypatch.setenv("PATHOLOGIZE_PATH_SEPARATOR", "")

        assert Settings().path_separator == os.sep

    @pytest.mark.unit
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.unit
    def test_unknown_log_level_rejected(self, monkeypatch):
        """A level name logging does not know fails at settings load."""
        monkeypatch.setenv("PATHOLOGIZE_LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            Settings()
