"""Tests for the stored-timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from harmonia.config import reset_settings_cache
from harmonia.utils import datetime as datetime_utils


@pytest.fixture()
def app_timezone(monkeypatch):
    def _use(name: str) -> None:
        monkeypatch.setenv("APP_TIMEZONE", name)
        reset_settings_cache()
        datetime_utils.get_app_timezone.cache_clear()

    yield _use
    monkeypatch.delenv("APP_TIMEZONE", raising=False)
    reset_settings_cache()
    datetime_utils.get_app_timezone.cache_clear()


def test_utc_round_trip_between_storage_and_domain(app_timezone):
    app_timezone("UTC")
    aware = datetime(2024, 3, 1, 8, 0, tzinfo=timezone(timedelta(hours=-5)))

    stored = datetime_utils.ensure_app_naive_datetime(aware)

    assert stored == datetime(2024, 3, 1, 13, 0)
    assert datetime_utils.ensure_app_timezone(stored) == aware
    assert datetime_utils.ensure_app_timezone(stored).tzinfo is timezone.utc


def test_named_zone_localizes_stored_values(app_timezone):
    app_timezone("America/New_York")

    stored = datetime_utils.ensure_app_naive_datetime(
        datetime(2024, 7, 1, 16, 0, tzinfo=timezone.utc)
    )

    assert stored == datetime(2024, 7, 1, 12, 0)


def test_unknown_zone_is_rejected(app_timezone):
    app_timezone("Mars/Olympus_Mons")

    with pytest.raises(ValueError):
        datetime_utils.get_app_timezone()


def test_none_passes_through():
    assert datetime_utils.ensure_app_timezone(None) is None
    assert datetime_utils.ensure_app_naive_datetime(None) is None
