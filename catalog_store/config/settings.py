"""
==============================================================================
Catalog Store Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared by every store created
without explicit limits.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables (prefixed with CATALOG_)
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Catalog store settings loaded from environment variables.

    Attributes:
        app_name: Display name used in log output
        app_env: Environment mode (development/staging/production)
        debug: Enable debug logging
        log_level: Logging level name used when debug is off
        log_format: Format string passed to logging.basicConfig
        max_search_results: Upper bound on any keyword search result
        default_page_size: Minimum length accepted by item data validation

    Example:
        >>> settings = Settings()
        >>> settings.max_search_results
        100
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Catalog Store",
        description="Display name used in log output"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    # =========================================================================
    # LOGGING SETTINGS
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level name"
    )

    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Log record format"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    max_search_results: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Upper bound on keyword search results"
    )

    default_page_size: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Minimum item data length for validation"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Normalize application environment.

        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Validate logging level name.

        Args:
            value: Level name such as "info" or "WARNING"

        Returns:
            Uppercase level name

        Raises:
            ValueError: If the level is not a standard logging level
        """
        supported = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        normalized = value.upper().strip()

        if normalized not in supported:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; debug mode forces DEBUG."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)

    def __repr__(self) -> str:
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"max_search_results={self.max_search_results}, "
            f"default_page_size={self.default_page_size})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Cached with lru_cache; call ``get_settings.cache_clear()`` to reload
    after changing the environment.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
