"""Tests for settings and their effect on bulk operations."""
import logging

import pytest
from pydantic import ValidationError

from microplate import config
from microplate.config import Settings, configure_logging
from microplate.models import ReplacePolicy, Well, WellSet


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        """Test the default values."""
        settings = Settings()
        assert settings.default_delimiter == ","
        assert settings.replace_policy is ReplacePolicy.UPSERT
        assert settings.output_delimiter == "\t"
        assert settings.missing_token == "Null"
        assert settings.json_indent == 2

    def test_environment_override(self, monkeypatch):
        """Test MICROPLATE_ variables override defaults."""
        monkeypatch.setenv("MICROPLATE_DEFAULT_DELIMITER", ";")
        monkeypatch.setenv("MICROPLATE_JSON_INDENT", "4")
        settings = Settings()
        assert settings.default_delimiter == ";"
        assert settings.json_indent == 4

    def test_invalid_policy_setting(self, monkeypatch):
        """Test an unknown replace policy fails when settings load."""
        monkeypatch.setenv("MICROPLATE_REPLACE_POLICY", "sometimes")
        with pytest.raises(ValidationError):
            Settings()

    def test_policy_setting_from_environment(self, monkeypatch):
        """Test the replace policy is parsed from the environment."""
        monkeypatch.setenv("MICROPLATE_REPLACE_POLICY", "existing_only")
        assert Settings().replace_policy is ReplacePolicy.EXISTING_ONLY

    def test_default_delimiter_applies(self, monkeypatch):
        """Test bulk operations split on the configured delimiter."""
        monkeypatch.setattr(config.settings, "default_delimiter", ";")
        assert len(WellSet("A1;A2")) == 2

    def test_replace_policy_applies(self, monkeypatch):
        """Test replace follows the configured policy."""
        monkeypatch.setattr(config.settings, "replace_policy", ReplacePolicy.EXISTING_ONLY)
        well_set = WellSet("A1")
        assert not well_set.replace(Well("B1"))
        assert "B1" not in well_set

    def test_invalid_policy(self):
        """Test unknown policies are rejected."""
        with pytest.raises(ValueError):
            WellSet("A1").replace(Well("A1"), policy="sometimes")


class TestLogging:
    """Test cases for logging setup."""

    def test_configure_logging(self, monkeypatch):
        """Test the configured level is passed to basicConfig."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging("debug")
        configure_logging()
        assert calls == [{"level": "DEBUG"}, {"level": "WARNING"}]
