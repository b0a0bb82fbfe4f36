"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Computed properties for derived values
- Cached settings instance

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


ID_STRATEGIES = ("max", "last")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        products_file: Path to the product catalog JSON file
        id_strategy: How new product ids are assigned ("max" or "last")
        json_indent: Indentation used when writing the catalog file

    Example:
        >>> settings = Settings()
        >>> print(settings.products_file)
        'data/products.json'
        >>> print(settings.app_env)
        'development'
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
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
        default="Product Manager",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    products_file: str = Field(
        default="data/products.json",
        description="Path to product catalog JSON"
    )

    id_strategy: str = Field(
        default="max",
        description="Id assignment: 'max' (highest id + 1) or 'last' (last record id + 1)"
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation for the catalog JSON file"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Args:
            value: Raw environment value

        Returns:
            Lowercase normalized environment name
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("id_strategy")
    @classmethod
    def validate_id_strategy(cls, value: str) -> str:
        """
        Validate the id assignment strategy.

        Raises:
            ValueError: If strategy is not supported
        """
        normalized = value.lower().strip()

        if normalized not in ID_STRATEGIES:
            raise ValueError(
                f"Unsupported id strategy: {value}. "
                f"Supported: {', '.join(ID_STRATEGIES)}"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def log_level(self) -> int:
        """Logging level derived from the debug flag."""
        return logging.DEBUG if self.debug else logging.INFO

    @property
    def products_path(self) -> Path:
        """
        Get products file as Path object.

        Returns:
            Path object pointing to products JSON file
        """
        return Path(self.products_file)

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def ensure_directories(self) -> None:
        """Create the directory holding the products file."""
        self.products_path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Required directories created/verified")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"products_file={self.products_file!r}, "
            f"id_strategy={self.id_strategy!r})"
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the cached Settings instance.

    Returns:
        Settings built from the current environment
    """
    settings = Settings()
    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
