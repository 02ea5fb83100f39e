"""Tests for the date/time helpers."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

import core.helpers.date_time_helper as dt
from core.tests.tz_helpers import BERLIN_TZ, pinned_tz, requires_tzset


def test_millis_round_trip() -> None:
    moment = datetime(2024, 3, 10, 12, 34, 56, 789000, tzinfo=timezone.utc)
    millis = dt.datetime_to_millis(moment)
    assert millis == 1710074096789
    assert dt.millis_to_datetime(millis, timezone.utc) == moment


def test_negative_millis_before_epoch() -> None:
    got = dt.millis_to_datetime(-1, timezone.utc)
    assert got == datetime(1969, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)


def test_naive_datetime_rejected() -> None:
    with pytest.raises(ValueError):
        dt.datetime_to_millis(datetime(2024, 1, 1))


def test_lookup_zone() -> None:
    assert dt.lookup_zone("Europe/Berlin") is not None
    assert dt.lookup_zone(None) is None
    assert dt.lookup_zone("") is None


def test_unknown_zone_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger=dt.__name__):
        assert dt.lookup_zone("Atlantis/Capital") is None
        assert dt.lookup_zone("Atlantis/Capital") is None
    assert caplog.text.count("Atlantis/Capital") == 1


def test_resolve_zone_falls_back() -> None:
    ambient = timezone(timedelta(hours=3))
    assert dt.resolve_zone("Not/AZone", ambient) is ambient
    assert dt.resolve_zone(None, ambient) is ambient


def test_today_at_in_zone() -> None:
    now = dt.datetime_to_millis(datetime(2024, 6, 1, 22, 15, 42, tzinfo=timezone.utc))
    plus2 = timezone(timedelta(hours=2))
    got = dt.today_at(6, 5, now_millis=now, zone=plus2)
    assert got == datetime(2024, 6, 2, 6, 5, tzinfo=plus2)


def test_utc_now_millis_is_current() -> None:
    before = dt.datetime_to_millis(datetime.now(timezone.utc))
    assert abs(dt.utc_now_millis() - before) < 5_000


def test_system_zone_is_tzinfo() -> None:
    assert datetime(2024, 1, 1, tzinfo=dt.system_zone()).utcoffset() is not None


@requires_tzset
def test_system_zone_follows_dst_rules() -> None:
    with pinned_tz(BERLIN_TZ):
        zone = dt.system_zone()
        winter = dt.millis_to_datetime(dt.datetime_to_millis(datetime(2024, 1, 15, 12, tzinfo=timezone.utc)), zone)
        summer = dt.millis_to_datetime(dt.datetime_to_millis(datetime(2024, 7, 15, 12, tzinfo=timezone.utc)), zone)
        assert winter.utcoffset() == timedelta(hours=1)
        assert summer.utcoffset() == timedelta(hours=2)
        assert (winter.hour, summer.hour) == (13, 14)
