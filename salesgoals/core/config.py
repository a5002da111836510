"""
Configuration management for the Sales Goals Backend
"""
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from salesgoals.constants import DEFAULT_LOCALE, SUPPORTED_LOCALES

APP_ENVIRONMENTS = ("local", "staging", "prod")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Service settings read from the environment (or a local .env file)"""

    APP_ENV: str = Field(default="local", description="Deployment environment: local, staging, prod")
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")

    # Comma-separated origins; '*' is refused in prod
    ALLOWED_ORIGINS: str = Field(default="*", description="CORS origins allowed to call the API")

    # Used only when a request omits its reference date
    APP_TIMEZONE: str = Field(default="UTC", description="Timezone used to resolve 'today' for metrics requests")

    # Weekday names in day descriptors
    WEEKDAY_LOCALE: str = Field(default=DEFAULT_LOCALE, description="Weekday name locale: en, pt_BR")

    # Projection bands around the realistic projection
    PROJECTION_PESSIMISTIC_FACTOR: float = Field(default=0.8, description="Pessimistic band multiplier")
    PROJECTION_OPTIMISTIC_FACTOR: float = Field(default=1.1, description="Optimistic band multiplier")

    VERSION: Optional[str] = Field(default=None, description="Build identifier reported by /version")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        if v not in APP_ENVIRONMENTS:
            raise ValueError(f"APP_ENV must be one of {list(APP_ENVIRONMENTS)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any casing, store upper-case"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}")
        return level

    @field_validator("WEEKDAY_LOCALE")
    @classmethod
    def validate_weekday_locale(cls, v: str) -> str:
        if v not in SUPPORTED_LOCALES:
            raise ValueError(f"WEEKDAY_LOCALE must be one of {list(SUPPORTED_LOCALES)}")
        return v

    @model_validator(mode="after")
    def validate_projection_factors(self) -> "Settings":
        """Pessimistic band must sit at or below the realistic one, optimistic at or above"""
        if not 0 < self.PROJECTION_PESSIMISTIC_FACTOR <= 1:
            raise ValueError("PROJECTION_PESSIMISTIC_FACTOR must be in (0, 1]")
        if self.PROJECTION_OPTIMISTIC_FACTOR < 1:
            raise ValueError("PROJECTION_OPTIMISTIC_FACTOR must be >= 1")
        return self

    def validate_production(self) -> None:
        """
        Refuse unsafe settings when APP_ENV is prod

        Raises:
            ValueError: If CORS origins are missing or wildcarded
        """
        if self.APP_ENV != "prod":
            return
        if not self.get_allowed_origins_list() or self.ALLOWED_ORIGINS.strip() == "*":
            raise ValueError("ALLOWED_ORIGINS must list explicit origins in prod")

    def get_allowed_origins_list(self) -> List[str]:
        """Origins for CORSMiddleware; ['*'] when unrestricted"""
        if self.ALLOWED_ORIGINS.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()

if settings.APP_ENV == "prod":
    settings.validate_production()
