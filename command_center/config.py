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
        default="sqlite:///./command_center.db",
        description="Database connection URL used by SQLAlchemy to reach the source tables",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone name (or UTC±HH:MM offset) used to localize datetimes",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level applied when the API starts",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to call the API from a browser",
    )
    activity_overdue_threshold_minutes: int = Field(
        default=0,
        description="Minutes past a due date before a non-event item counts as overdue",
        ge=0,
    )
    activity_in_progress_window_hours: int = Field(
        default=24,
        description="Window after now in which a gathering is considered in progress",
        gt=0,
    )
    activity_recent_window_days: int = Field(
        default=7,
        description="How far back finished items remain in the recent history section",
        gt=0,
    )
    activity_default_page_size: int = Field(
        default=20,
        description="Number of feed items returned when no page size is requested",
        gt=0,
    )
    activity_max_page_size: int = Field(
        default=100,
        description="Largest page size a caller may request",
        gt=0,
    )
    activity_collector_timeout_seconds: float = Field(
        default=10.0,
        description="Deadline applied to every collector call during a fan-out",
        gt=0,
    )
    activity_cache_ttl_seconds: int = Field(
        default=120,
        description="Time-to-live the boundary layer should apply to cached feeds and counts",
        ge=0,
    )

    @model_validator(mode="after")
    def _validate_page_sizes(self) -> "Settings":
        if self.activity_default_page_size > self.activity_max_page_size:
            raise ValueError(
                "ACTIVITY_DEFAULT_PAGE_SIZE cannot exceed ACTIVITY_MAX_PAGE_SIZE"
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
