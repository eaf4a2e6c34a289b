"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files.

Example:
    >>> from monadcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.adt_discriminator
    'kind'
    >>> settings.log_level
    'WARNING'

    # Or with environment variables:
    # MONADCASE_LOG_LEVEL=DEBUG
    # MONADCASE_REPR_MAX_ITEMS=25
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MonadcaseSettings(BaseSettings):
    """Root settings for the monadcase library.

    Example environment variables:
        MONADCASE_LOG_LEVEL=DEBUG
        MONADCASE_LOG_CAPTURED_ERRORS=false
        MONADCASE_ADT_DISCRIMINATOR=tag
        MONADCASE_REPR_MAX_ITEMS=25
    """

    model_config = SettingsConfigDict(
        env_prefix="MONADCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_captured_errors: bool = Field(
        default=True,
        description="Log exceptions captured at Try combinator boundaries (DEBUG level)",
    )
    adt_discriminator: str = Field(
        default="kind",
        description="Default discriminant field name for sum types",
    )
    repr_max_items: PositiveInt = Field(
        default=10,
        description="Max elements shown by List.__repr__",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Normalize level name to uppercase."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("adt_discriminator")
    @classmethod
    def _check_identifier(cls, v: str) -> str:
        if not v.isidentifier() or v.startswith("_"):
            raise ValueError(f"discriminator must be a public identifier, got {v!r}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> MonadcaseSettings:
    """Get the global settings instance (cached)."""
    return MonadcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
