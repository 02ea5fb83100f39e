"""
ClockEngine – live/fixed clock state machine.

Conventions:
- All entry points are synchronous and expect one-at-a-time invocation
  from the host's UI thread.
- Every update builds a fresh TimeValue; the previous one is never mutated.
- The engine never performs I/O; it returns and caches RenderedTime.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from core.helpers.date_time_helper import datetime_to_millis, today_at, utc_now_millis
from deskclock.exceptions.errors import InvalidArgument
from deskclock.logic.sleep_time_calculator import SleepTimeCalculator
from deskclock.logic.time_formatter import TimeFormatter
from deskclock.models.clock_state import ClockState
from deskclock.models.format_mode import FormatMode
from deskclock.models.rendered_time import RenderedTime
from deskclock.models.time_value import TimeValue

logger = logging.getLogger(__name__)


class ClockEngine:
    """
    Holds the current TimeValue, live/fixed mode and format mode.

    DI:
        formatter: TimeFormatter
        now_millis: system clock, epoch milliseconds
        sleep_calculator: used by suggested_sleep_times()
    """

    def __init__(
        self,
        *,
        formatter: Optional[TimeFormatter] = None,
        now_millis: Callable[[], int] = utc_now_millis,
        format_mode: Optional[FormatMode] = None,
        timezone_override: Optional[str] = None,
        sleep_calculator: Optional[SleepTimeCalculator] = None,
        live: bool = True,
    ) -> None:
        self._formatter = formatter or TimeFormatter()
        self._now_millis = now_millis
        self._sleep_calculator = sleep_calculator or SleepTimeCalculator()
        self._format_mode = format_mode or FormatMode()
        self._live = live
        self._current = TimeValue(now_millis(), timezone_override or None)
        self._rendered: Optional[RenderedTime] = None

    # --- Read access --------------------------------------------------------

    @property
    def is_live(self) -> bool:
        return self._live

    @property
    def format_mode(self) -> FormatMode:
        return self._format_mode

    @property
    def current(self) -> TimeValue:
        return self._current

    @property
    def rendered(self) -> Optional[RenderedTime]:
        """Strings from the last update, or None before the first one."""
        return self._rendered

    @property
    def state(self) -> ClockState:
        return ClockState(current=self._current, is_live=self._live, format_mode=self._format_mode)

    # --- Update entry points ------------------------------------------------

    def set_live(self, live: bool) -> None:
        if live != self._live:
            logger.debug("Clock %s", "live" if live else "fixed")
        self._live = live

    def update_now(self) -> RenderedTime:
        if self._live:
            self._current = self._current.with_instant(self._now_millis())
        self._rendered = self._formatter.render(self._current, self._format_mode)
        return self._rendered

    def set_fixed_time(self, hour: int, minute: int) -> RenderedTime:
        """
        Pins the clock to today at hour:minute (alarm preview).

        Raises:
            InvalidArgument: hour not in [0, 23] or minute not in [0, 59].
                The engine state is left unchanged.
        """
        if not _is_in_range(hour, 23):
            raise InvalidArgument(f"hour must be in [0, 23], got {hour!r}")
        if not _is_in_range(minute, 59):
            raise InvalidArgument(f"minute must be in [0, 59], got {minute!r}")

        zone = self._formatter.zone_for(self._current)
        pinned = today_at(hour, minute, now_millis=self._now_millis(), zone=zone)
        return self.set_time(self._current.with_instant(datetime_to_millis(pinned)))

    def set_time(self, value: TimeValue) -> RenderedTime:
        """Pins the clock to an explicit TimeValue."""
        self.set_live(False)
        self._current = value
        return self.update_now()

    def set_time_zone_override(self, zone_id: Optional[str]) -> RenderedTime:
        """Sets or clears (None / "") the rendering zone."""
        logger.debug("Timezone override: %r", zone_id)
        self._current = self._current.with_override(zone_id)
        return self.update_now()

    def on_format_preference_changed(self, use_24_hour: Optional[bool]) -> RenderedTime:
        self._format_mode = FormatMode.from_preference(use_24_hour)
        logger.debug("Format mode: %s", self._format_mode.hours_pattern)
        return self.update_now()

    # --- Sleep suggestions --------------------------------------------------

    def suggested_sleep_times(self) -> str:
        """Bedtimes for waking at the current value, in the current format mode."""
        return self._sleep_calculator.suggest_text(self._current, self._format_mode, self._formatter)


def _is_in_range(value: object, upper: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= upper
