"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing session tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        description="Number of minutes before session tokens expire",
        gt=0,
    )
    session_cookie_name: str = Field(
        default="harmonia_session",
        description="Name of the HttpOnly cookie carrying the session token",
        min_length=1,
    )
    session_cookie_secure: bool = Field(
        default=False,
        description="Only send the session cookie over HTTPS",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone used to localize stored timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    websocket_path: str = Field(
        default="/ws",
        description="Upgrade path the realtime notification bridge listens on",
    )
    azure_storage_connection_string: str | None = Field(
        default=None,
        description="Connection string of the storage account holding medical record files",
    )
    azure_storage_container_name: str | None = Field(
        default=None,
        description="Blob container that stores medical record files",
    )
    upload_url_ttl_minutes: int = Field(
        default=15,
        description="Lifetime of signed upload URLs handed to clients",
        gt=0,
    )

    @model_validator(mode="after")
    def _validate_websocket_path(self) -> "Settings":
        if not self.websocket_path.startswith("/"):
            raise ValueError("WEBSOCKET_PATH must start with '/'")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
