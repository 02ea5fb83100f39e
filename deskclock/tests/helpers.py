"""Shared fixtures for deskclock tests: fixed clock, fixed zone, fixed labels."""
from __future__ import annotations

from datetime import datetime, timezone

from core.helpers.date_time_helper import datetime_to_millis
from core.tests.tz_helpers import BERLIN_TZ, pinned_tz, requires_tzset  # noqa: F401  re-exported for deskclock tests
from deskclock.logic.time_formatter import TimeFormatter
from deskclock.models.time_value import TimeValue


def utc_millis(year: int, month: int, day: int, hour: int, minute: int, second: int = 0) -> int:
    return datetime_to_millis(datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc))


def utc_value(hour: int, minute: int, *, day: int = 15, override: str | None = None) -> TimeValue:
    return TimeValue(utc_millis(2024, 1, day, hour, minute), override)


def make_formatter() -> TimeFormatter:
    return TimeFormatter(am_pm_labels=lambda: ("AM", "PM"), ambient_zone=lambda: timezone.utc)


class FakeClock:
    """Manually advanced system clock."""

    def __init__(self, millis: int) -> None:
        self.millis = millis

    def __call__(self) -> int:
        return self.millis

    def advance_minutes(self, minutes: int) -> None:
        self.millis += minutes * 60_000
