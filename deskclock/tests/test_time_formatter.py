"""Tests for TimeFormatter rendering."""
from __future__ import annotations

from datetime import timezone

import pytest

from deskclock.logic.time_formatter import TimeFormatter
from deskclock.models.format_mode import FormatMode
from deskclock.models.time_value import TimeValue
from deskclock.tests.helpers import BERLIN_TZ, make_formatter, pinned_tz, requires_tzset, utc_millis, utc_value

H24 = FormatMode(use_24_hour=True)
H12 = FormatMode(use_24_hour=False)


@pytest.mark.parametrize(
    ("hour", "expected_24", "expected_12"),
    [(0, "00", "12"), (7, "07", "7"), (11, "11", "11"), (12, "12", "12"), (13, "13", "1"), (23, "23", "11")],
)
def test_render_hours(hour: int, expected_24: str, expected_12: str) -> None:
    fmt = make_formatter()
    tv = utc_value(hour, 5)
    assert fmt.render_hours(tv, H24) == expected_24
    assert fmt.render_hours(tv, H12) == expected_12


def test_render_minutes_is_zero_padded_and_mode_independent() -> None:
    fmt = make_formatter()
    assert fmt.render_minutes(utc_value(9, 5)) == ":05"
    assert fmt.render_minutes(utc_value(21, 59)) == ":59"


def test_hours_and_minutes_reparse_to_same_time() -> None:
    fmt = make_formatter()
    for hour in range(24):
        for minute in (0, 1, 30, 59):
            tv = utc_value(hour, minute)
            h24 = int(fmt.render_hours(tv, H24))
            h12 = int(fmt.render_hours(tv, H12)) % 12
            if fmt.render_meridiem(tv, H12) == "PM":
                h12 += 12
            parsed_minute = int(fmt.render_minutes(tv).lstrip(":"))
            assert (h24, parsed_minute) == (hour, minute)
            assert (h12, parsed_minute) == (hour, minute)


def test_meridiem_absent_in_24_hour_mode() -> None:
    fmt = make_formatter()
    for hour in range(24):
        assert fmt.render_meridiem(utc_value(hour, 0), H24) is None


def test_meridiem_present_in_12_hour_mode() -> None:
    fmt = make_formatter()
    for hour in range(24):
        assert fmt.render_meridiem(utc_value(hour, 0), H12) in ("AM", "PM")


def test_morning_boundary() -> None:
    fmt = make_formatter()
    assert fmt.render_meridiem(utc_value(0, 0), H12) == "AM"
    assert fmt.render_meridiem(utc_value(11, 59), H12) == "AM"
    assert fmt.render_meridiem(utc_value(12, 0), H12) == "PM"


def test_accessible_description() -> None:
    fmt = make_formatter()
    assert fmt.render_accessible_description(utc_value(19, 4), H12) == "7:04PM"
    assert fmt.render_accessible_description(utc_value(19, 4), H24) == "19:04"


def test_render_bundles_all_tokens() -> None:
    rendered = make_formatter().render(utc_value(0, 30), H12)
    assert rendered.hours == "12"
    assert rendered.minutes == ":30"
    assert rendered.meridiem == "AM"
    assert rendered.description == "12:30AM"


def test_render_short_adds_space_before_meridiem() -> None:
    fmt = make_formatter()
    assert fmt.render_short(utc_value(21, 46), H12) == "9:46 PM"
    assert fmt.render_short(utc_value(21, 46), H24) == "21:46"


def test_timezone_override_applies() -> None:
    fmt = make_formatter()
    # 2024-01-15 07:00 UTC is 16:00 in Tokyo (UTC+9, no DST)
    tv = utc_value(7, 0, override="Asia/Tokyo")
    assert fmt.render_hours(tv, H24) == "16"
    assert fmt.render_meridiem(tv, H12) == "PM"


def test_unknown_timezone_falls_back_to_ambient() -> None:
    fmt = make_formatter()
    plain = fmt.render(utc_value(7, 0), H12)
    assert fmt.render(utc_value(7, 0, override="Mars/Olympus_Mons"), H12) == plain
    assert fmt.render(utc_value(7, 0, override=""), H12) == plain


def test_labels_come_from_lookup() -> None:
    fmt = TimeFormatter(am_pm_labels=lambda: ("vorm.", "nachm."), ambient_zone=lambda: timezone.utc)
    assert fmt.render_meridiem(utc_value(8, 0), H12) == "vorm."
    assert fmt.render_meridiem(utc_value(20, 0), H12) == "nachm."


@requires_tzset
def test_ambient_zone_follows_dst_in_both_seasons() -> None:
    fmt = TimeFormatter(am_pm_labels=lambda: ("AM", "PM"))
    winter = TimeValue(utc_millis(2024, 1, 15, 12, 0))
    summer = TimeValue(utc_millis(2024, 7, 15, 12, 0))
    with pinned_tz(BERLIN_TZ):
        assert fmt.render_accessible_description(winter, H24) == "13:00"
        assert fmt.render_accessible_description(summer, H24) == "14:00"
        assert fmt.render_accessible_description(winter, H12) == "1:00PM"
