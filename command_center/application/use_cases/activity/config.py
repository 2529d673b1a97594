"""Tuning constants for classification, pagination and collector deadlines."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from command_center.config import Settings


@dataclass(frozen=True)
class ActivityConfig:
    """Immutable thresholds handed to the aggregation core on every call."""

    overdue_threshold: timedelta = timedelta(0)
    in_progress_window: timedelta = timedelta(hours=24)
    recent_window: timedelta = timedelta(days=7)
    default_page_size: int = 20
    # None lifts the cap for in-process callers; the HTTP layer always sets one.
    max_page_size: int | None = 100
    collector_timeout_seconds: float | None = 10.0
    cache_ttl_seconds: int = 120

    @classmethod
    def from_settings(cls, settings: Settings) -> "ActivityConfig":
        return cls(
            overdue_threshold=timedelta(minutes=settings.activity_overdue_threshold_minutes),
            in_progress_window=timedelta(hours=settings.activity_in_progress_window_hours),
            recent_window=timedelta(days=settings.activity_recent_window_days),
            default_page_size=settings.activity_default_page_size,
            max_page_size=settings.activity_max_page_size,
            collector_timeout_seconds=settings.activity_collector_timeout_seconds,
            cache_ttl_seconds=settings.activity_cache_ttl_seconds,
        )


DEFAULT_ACTIVITY_CONFIG = ActivityConfig()


__all__ = ["ActivityConfig", "DEFAULT_ACTIVITY_CONFIG"]
