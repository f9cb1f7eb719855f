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
        default="sqlite:///./smartcart.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone (or UTC offset) used to store notification timestamps",
    )
    firebase_credentials_file: str | None = Field(
        default=None,
        description="Path to the Firebase service account JSON used for FCM delivery",
    )
    firebase_project_id: str | None = Field(
        default=None,
        description="Firebase project identifier; inferred from the credentials when omitted",
    )
    push_send_timeout_seconds: float = Field(
        default=10.0,
        description="Seconds before a single push transport call is treated as failed",
        gt=0,
    )
    notification_retention_days: int = Field(
        default=30,
        description="Age in days after which notification records are purged",
        ge=0,
    )
    broadcast_title: str = Field(
        default="SmartCart",
        description="Title used for every broadcast notification",
        min_length=1,
    )
    currency_symbol: str = Field(
        default="₹",
        description="Currency symbol prefixed to prices in price drop alerts",
    )

    @model_validator(mode="after")
    def _validate_firebase_pair(self) -> "Settings":
        if self.firebase_project_id and not self.firebase_credentials_file:
            raise ValueError(
                "FIREBASE_PROJECT_ID requires FIREBASE_CREDENTIALS_FILE to enable push delivery"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
