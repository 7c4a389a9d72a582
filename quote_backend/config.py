"""
Configuration and settings for the quote service.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings, frozen once the process has started."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    api_prefix: str = Field(
        default="/api",
        validation_alias=AliasChoices("QUOTES_API_PREFIX", "api_prefix"),
    )

    # Supabase (PostgREST) quote table
    supabase_url: Optional[str] = Field(default=None)
    supabase_api_key: Optional[str] = Field(default=None)
    supabase_timeout_seconds: Optional[float] = Field(default=10.0)

    # Variant toggles
    persistence_enabled: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "QUOTES_PERSISTENCE_ENABLED", "persistence_enabled"
        ),
    )
    use_in_memory_store: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "QUOTES_USE_IN_MEMORY_STORE", "use_in_memory_store"
        ),
    )

    cors_allow_origin: str = Field(
        default="*",
        validation_alias=AliasChoices("QUOTES_CORS_ALLOW_ORIGIN", "cors_allow_origin"),
    )

    @property
    def has_remote_store(self) -> bool:
        return bool(self.supabase_url) and bool(self.supabase_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
