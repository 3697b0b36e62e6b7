"""
Unit tests for backend/settings.py
"""

from datetime import date

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "JWT_SECRET",
    "DEFAULT_CLASS_CAPACITY",
    "PROGRAM_WEEKS",
    "PROGRAM_START_DATE",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_supabase_fields_default_to_none(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_key is None

    def test_scheduling_defaults(self, clean_env):
        """Capacity 8, an 8-week cycle counted from January 1st."""
        settings = Settings(_env_file=None)
        assert settings.default_class_capacity == 8
        assert settings.program_weeks == 8
        assert settings.program_start_date is None

    def test_jwt_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_secret

    def test_cors_origins_empty(self, clean_env):
        assert Settings(_env_file=None).cors_origins_list == []


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_reads_environment_variables(self, clean_env, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")
        monkeypatch.setenv("DEFAULT_CLASS_CAPACITY", "12")
        monkeypatch.setenv("PROGRAM_START_DATE", "2026-09-07")
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example,")

        settings = Settings(_env_file=None)
        assert settings.environment == "production"
        assert settings.is_production is True
        assert settings.default_class_capacity == 12
        assert settings.program_start_date == date(2026, 9, 7)
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]

    def test_service_role_key_preferred(self, clean_env):
        settings = Settings(
            supabase_service_role_key="service", supabase_anon_key="anon", _env_file=None
        )
        assert settings.supabase_key == "service"
        assert Settings(supabase_anon_key="anon", _env_file=None).supabase_key == "anon"


@pytest.mark.unit
class TestSettingsValidation:
    def test_invalid_environment(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(environment="qa", _env_file=None)

    def test_capacity_must_be_positive(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(default_class_capacity=0, _env_file=None)

    @pytest.mark.parametrize("weeks", [0, 9])
    def test_program_weeks_range(self, clean_env, weeks):
        with pytest.raises(ValidationError):
            Settings(program_weeks=weeks, _env_file=None)

    def test_helper_properties(self, clean_env):
        settings = Settings(environment="test", _env_file=None)
        assert settings.is_test is True
        assert settings.is_development is False


@pytest.mark.unit
class TestGetSettings:
    def test_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
