"""
Application configuration.
All values come from environment variables (or a local .env file).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_ENVIRONMENTS = frozenset({"production", "prod"})


class AppConfig(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=".env", extra="ignore")

    name: str = "rest-errors"
    # development | test | staging | production
    environment: str = "development"
    debug: bool = False

    @property
    def is_production(self) -> bool:
        """Whether the process runs in a production-like mode."""
        return self.environment.strip().lower() in PRODUCTION_ENVIRONMENTS


class ErrorsConfig(BaseSettings):
    """Error normalizer configuration."""

    model_config = SettingsConfigDict(env_prefix="ERRORS_", env_file=".env", extra="ignore")

    # None follows APP_ENVIRONMENT; true/false forces 422 details validation on or off
    validate_details: bool | None = None


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: str = "INFO"
    # console | json
    format: str = "console"


class Settings:
    """Aggregator of all configuration groups."""

    def __init__(self) -> None:
        self.app = AppConfig()
        self.errors = ErrorsConfig()
        self.logging = LoggingConfig()

    @property
    def validate_error_details(self) -> bool:
        """Resolve whether 422 details are checked against the producer contract."""
        if self.errors.validate_details is not None:
            return self.errors.validate_details
        return not self.app.is_production


@lru_cache
def get_settings() -> Settings:
    """Return the settings singleton (cached)."""
    return Settings()
