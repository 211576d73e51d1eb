"""Tests for application configuration.

Covers defaults, environment loading, and settings validation.
"""

import pytest
from pydantic import ValidationError

from careercampus.core.config import Settings

_PRODUCTION = "production"


class TestDefaults:
    """Tests for default settings values."""

    def test_model_defaults_match_recommendation_call(self):
        """Default model and temperature are the ones career paths use."""
        s = Settings(_env_file=None)
        assert s.gemini_model == "gemini-2.5-flash"
        assert s.llm_temperature == 0.7

    def test_ats_truncation_default(self):
        """ATS analysis sends at most 5000 characters by default."""
        s = Settings(_env_file=None)
        assert s.ats_resume_max_chars == 5000

    def test_rate_limit_defaults(self):
        """Model endpoints are limited to 10 requests per minute by default."""
        s = Settings(_env_file=None)
        assert s.rate_limit_llm == "10/minute"
        assert s.rate_limit_enabled is True


class TestEnvironmentLoading:
    """Tests for environment variable loading."""

    def test_reads_google_api_key_from_env(self, monkeypatch):
        """GOOGLE_API_KEY is picked up from the environment."""
        monkeypatch.setenv("GOOGLE_API_KEY", "env-key")
        s = Settings(_env_file=None)
        assert s.google_api_key == "env-key"

    def test_env_var_names_are_case_insensitive(self, monkeypatch):
        """Lower-case variable names are accepted."""
        monkeypatch.setenv("gemini_model", "gemini-custom")
        s = Settings(_env_file=None)
        assert s.gemini_model == "gemini-custom"


class TestSettingsValidation:
    """Tests for settings validation rules."""

    def test_rejects_wildcard_cors_origin(self):
        """Wildcard origins are incompatible with credentials."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, allowed_origins=["*"])
        assert "must not contain '*'" in str(exc_info.value)

    def test_rejects_out_of_range_temperature(self):
        """Temperature must be within 0..2."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, llm_temperature=2.5)

    def test_rejects_non_positive_ats_limit(self):
        """ATS truncation limit must be positive."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, ats_resume_max_chars=0)

    def test_rejects_unknown_log_level(self):
        """Log level must be a standard level name."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_production_requires_api_key(self):
        """Production deployments must configure GOOGLE_API_KEY."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, environment=_PRODUCTION, google_api_key="")
        assert "GOOGLE_API_KEY must be set in production" in str(exc_info.value)

    def test_production_with_api_key_is_valid(self):
        """Production with a key configured passes validation."""
        s = Settings(_env_file=None, environment=_PRODUCTION, google_api_key="k")
        assert s.environment == _PRODUCTION

    def test_development_allows_missing_api_key(self):
        """The app can start without a key outside production."""
        s = Settings(_env_file=None, environment="development", google_api_key="")
        assert s.google_api_key == ""
