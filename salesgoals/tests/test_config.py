"""
Tests for settings validation
"""
import pytest
from pydantic import ValidationError

from salesgoals.core.config import Settings


def test_defaults():
    """Test default settings"""
    settings = Settings(_env_file=None)
    assert settings.APP_TIMEZONE == "UTC"
    assert settings.PROJECTION_PESSIMISTIC_FACTOR == 0.8
    assert settings.PROJECTION_OPTIMISTIC_FACTOR == 1.1


def test_invalid_app_env():
    """Test that unknown environments are rejected"""
    with pytest.raises(ValidationError):
        Settings(APP_ENV="dev")


def test_log_level_is_normalised():
    """Test that LOG_LEVEL is upper-cased"""
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_invalid_locale():
    """Test that unsupported weekday locales are rejected"""
    with pytest.raises(ValidationError):
        Settings(WEEKDAY_LOCALE="fr")


@pytest.mark.parametrize(
    "pessimistic,optimistic",
    [(0, 1.1), (1.2, 1.1), (0.8, 0.9)],
)
def test_invalid_projection_factors(pessimistic, optimistic):
    """Test that bands must bracket the realistic projection"""
    with pytest.raises(ValidationError):
        Settings(PROJECTION_PESSIMISTIC_FACTOR=pessimistic, PROJECTION_OPTIMISTIC_FACTOR=optimistic)


def test_production_rejects_wildcard_origins():
    """Test that prod requires explicit CORS origins"""
    settings = Settings(APP_ENV="prod", ALLOWED_ORIGINS="*")
    with pytest.raises(ValueError):
        settings.validate_production()


def test_allowed_origins_list():
    """Test comma-separated origins parsing"""
    settings = Settings(ALLOWED_ORIGINS="https://a.example.com, https://b.example.com,")
    assert settings.get_allowed_origins_list() == ["https://a.example.com", "https://b.example.com"]
    assert Settings(ALLOWED_ORIGINS="*").get_allowed_origins_list() == ["*"]
