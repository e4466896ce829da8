"""
Configuration management using Pydantic Settings.

Library behavior that is worth tuning per deployment is loaded from
environment variables prefixed with ``WELLCRAFTED_``. Nothing here is
required; every setting has a default.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from wellcrafted.core.config import get_settings

    settings = get_settings()
    if settings.strict_validation:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wellcrafted.core.enums import Environment

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (WELLCRAFTED_*)
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    strict_validation: bool = Field(
        default=True,
        description="Validate declared context shapes in pydantic strict mode (no coercion)",
    )

    model_config = SettingsConfigDict(
        env_prefix="WELLCRAFTED_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name, any case.

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the name is not a standard level.
        """
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """
        Whether logs should be rendered as JSON.

        Returns:
            bool: False in development (human-readable), True elsewhere.
        """
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.
    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
