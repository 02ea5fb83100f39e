"""
TimeFormatter – renders a TimeValue into hour, minute and meridiem text.
Separated from the engine so rendering stays a pure function of (time, mode).
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Callable, Optional

from core.helpers.date_time_helper import millis_to_datetime, resolve_zone, system_zone
from core.i18n.locale import locale
from deskclock.models.format_mode import FormatMode
from deskclock.models.rendered_time import RenderedTime
from deskclock.models.time_value import TimeValue

AmPmLookup = Callable[[], tuple[str, str]]
ZoneProvider = Callable[[], tzinfo]


class TimeFormatter:
    """Formats hours, minutes and meridiem for a TimeValue."""

    def __init__(
        self,
        *,
        am_pm_labels: Optional[AmPmLookup] = None,
        ambient_zone: Optional[ZoneProvider] = None,
    ) -> None:
        self._am_pm_labels = am_pm_labels or locale.am_pm_labels
        self._ambient_zone = ambient_zone or system_zone

    def zone_for(self, time: TimeValue) -> tzinfo:
        return resolve_zone(time.timezone_override, self._ambient_zone())

    def localize(self, time: TimeValue) -> datetime:
        return millis_to_datetime(time.instant_millis, self.zone_for(time))

    # --- Tokens -------------------------------------------------------------

    def render_hours(self, time: TimeValue, mode: FormatMode) -> str:
        hour = self.localize(time).hour
        if mode.use_24_hour:
            return f"{hour:02d}"
        return str(hour % 12 or 12)

    def render_minutes(self, time: TimeValue) -> str:
        return f":{self.localize(time).minute:02d}"

    def render_meridiem(self, time: TimeValue, mode: FormatMode) -> Optional[str]:
        if not mode.shows_meridiem():
            return None
        am, pm = self._am_pm_labels()
        # midnight counts as morning
        return am if self.localize(time).hour < 12 else pm

    def render_accessible_description(self, time: TimeValue, mode: FormatMode) -> str:
        return self.render(time, mode).description

    # --- Combined -----------------------------------------------------------

    def render(self, time: TimeValue, mode: FormatMode) -> RenderedTime:
        hours = self.render_hours(time, mode)
        minutes = self.render_minutes(time)
        meridiem = self.render_meridiem(time, mode)
        return RenderedTime(
            hours=hours,
            minutes=minutes,
            meridiem=meridiem,
            description=hours + minutes + (meridiem or ""),
        )

    def render_short(self, time: TimeValue, mode: FormatMode) -> str:
        """
        Returns "h:mm AM" in 12-hour mode or "kk:mm" in 24-hour mode.
        """
        text = self.render_hours(time, mode) + self.render_minutes(time)
        meridiem = self.render_meridiem(time, mode)
        return f"{text} {meridiem}" if meridiem else text
