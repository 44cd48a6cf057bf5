"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import DebounceMs, PositiveFloat, SearchLimit


class CatalogSettings(BaseModel):
    """Remote catalog (iTunes Search API) configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(
        default="https://itunes.apple.com/search",
        validation_alias=AliasChoices("base_url", "url", "search_url"),
    )
    entity: str = Field(default="song", min_length=1)
    limit: SearchLimit = 15
    timeout_s: PositiveFloat | None = Field(
        default=None,
        validation_alias=AliasChoices("timeout_s", "timeout"),
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate catalog URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Catalog base URL must start with http:// or https://")
        return v


class SearchSettings(BaseModel):
    """Search input handling configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    debounce_ms: DebounceMs = Field(
        default=500,
        validation_alias=AliasChoices("debounce_ms", "debounce"),
    )
    discard_stale_responses: bool = False


class AudioSettings(BaseModel):
    """Audio output configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    player_binary: str = Field(
        default="ffplay",
        min_length=1,
        validation_alias=AliasChoices("player_binary", "player"),
    )
    probe_binary: str = Field(
        default="ffprobe",
        min_length=1,
        validation_alias=AliasChoices("probe_binary", "probe"),
    )
    progress_interval_s: float = Field(default=0.25, gt=0.0, le=10.0)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - CATALOG__BASE_URL, CATALOG__LIMIT, CATALOG__TIMEOUT_S (nested)
    - SEARCH__DEBOUNCE_MS, SEARCH__DISCARD_STALE_RESPONSES (nested)
    - AUDIO__PLAYER_BINARY, AUDIO__PROGRESS_INTERVAL_S (nested)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
