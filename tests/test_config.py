"""Tests for settings and the thresholds derived from them."""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from command_center import config as app_config
from command_center.application.use_cases.activity import ActivityConfig
from command_center.utils import datetime as datetime_utils


def test_activity_config_is_built_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACTIVITY_IN_PROGRESS_WINDOW_HOURS", "12")
    monkeypatch.setenv("ACTIVITY_RECENT_WINDOW_DAYS", "3")
    monkeypatch.setenv("ACTIVITY_DEFAULT_PAGE_SIZE", "5")

    config = ActivityConfig.from_settings(app_config.Settings())

    assert config.in_progress_window == timedelta(hours=12)
    assert config.recent_window == timedelta(days=3)
    assert config.overdue_threshold == timedelta(0)
    assert config.default_page_size == 5
    assert config.max_page_size == 100
    assert config.cache_ttl_seconds == 120


def test_default_page_size_cannot_exceed_maximum(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACTIVITY_DEFAULT_PAGE_SIZE", "50")
    monkeypatch.setenv("ACTIVITY_MAX_PAGE_SIZE", "10")

    with pytest.raises(ValidationError):
        app_config.Settings()


@pytest.mark.parametrize(
    ("name", "expected_offset"),
    [
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+0530", timedelta(hours=5, minutes=30)),
        ("Not/AZone", timedelta(0)),
    ],
)
def test_timezone_resolution_accepts_offsets(name, expected_offset) -> None:
    tz = datetime_utils._resolve_timezone(name)

    assert tz.utcoffset(None) == expected_offset


def test_app_timezone_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_TIMEZONE", "UTC+02:00")
    app_config.reset_settings_cache()
    datetime_utils.reset_app_timezone_cache()
    try:
        now = datetime_utils.now_in_app_timezone()
        assert now.utcoffset() == timedelta(hours=2)
    finally:
        monkeypatch.delenv("APP_TIMEZONE")
        app_config.reset_settings_cache()
        datetime_utils.reset_app_timezone_cache()

    assert datetime_utils.get_app_timezone().utcoffset(None) == timedelta(0)
