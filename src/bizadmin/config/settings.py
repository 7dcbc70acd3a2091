"""
Application settings for bizadmin.

All values are read from the environment (or a local ``.env`` file) through
pydantic-settings. Services receive an ``AppSettings`` instance explicitly;
``get_settings()`` is the cached process-wide accessor used by entry points.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CacheDefaults, DEFAULT_PAGE_SIZE


class AppSettings(BaseSettings):
    """Settings shared by the data layer, the email proxy and the CLI."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    app_name: str = Field(default="bizadmin")
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Hosted database (PostgREST endpoint)
    supabase_url: str = Field(default="http://localhost:54321")
    supabase_anon_key: SecretStr = Field(default=SecretStr(""))
    database_timeout_seconds: float = Field(default=10.0)

    # Cache
    cache_ttl_seconds: int = Field(default=CacheDefaults.TTL_SECONDS)
    cache_max_entries: int = Field(default=CacheDefaults.MAX_ENTRIES)
    redis_url: Optional[str] = Field(default=None)

    # Listing
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE)
    search_short_debounce_ms: int = Field(default=300)
    search_long_debounce_ms: int = Field(default=500)

    # Connectivity
    connectivity_probe_url: Optional[str] = Field(default=None)
    connectivity_timeout_seconds: float = Field(default=3.0)

    # Email proxy
    email_proxy_url: str = Field(default="http://localhost:3001/send-email")
    mailtrap_api_url: str = Field(default="https://send.api.mailtrap.io/api/send")
    mailtrap_api_token: SecretStr = Field(default=SecretStr(""))
    email_from_address: str = Field(default="no-reply@example.com")
    email_from_name: str = Field(default="HR Admin")
    cors_origins: list[str] = Field(default=["*"])
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)

    # Password reset
    app_link_base: str = Field(default="bizadmin://reset-password")
    password_reset_ttl_minutes: int = Field(default=60)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_persistent_cache_enabled(self) -> bool:
        """Redis backs the second cache tier only when configured."""
        return self.redis_url is not None

    @property
    def search_debounce_seconds(self) -> tuple[float, float]:
        """Short and long search debounce intervals in seconds."""
        return self.search_short_debounce_ms / 1000, self.search_long_debounce_ms / 1000


@lru_cache()
def get_settings() -> AppSettings:
    """Get cached settings instance."""
    return AppSettings()
