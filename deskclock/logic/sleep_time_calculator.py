"""Sleep time calculator – pure business logic.

Backs off from a wake time by a fall-asleep buffer and then by whole sleep
cycles to produce candidate bedtimes.

No I/O: this module only transforms data.
"""

from __future__ import annotations

import logging
from typing import Optional

from deskclock.logic.time_formatter import TimeFormatter
from deskclock.models.format_mode import FormatMode
from deskclock.models.sleep_settings import SleepSettings
from deskclock.models.time_value import TimeValue

logger = logging.getLogger(__name__)

SEPARATOR = ", "


class SleepTimeCalculator:
    """Derives ordered, deduplicated bedtimes from a wake time."""

    def __init__(self, settings: Optional[SleepSettings] = None) -> None:
        self._settings = (settings or SleepSettings()).validate()

    @property
    def settings(self) -> SleepSettings:
        return self._settings

    def suggest(self, wake: TimeValue) -> list[TimeValue]:
        """
        Returns the candidate bedtimes, earliest first.

        Args:
            wake (TimeValue): Target wake time. Its timezone override is kept.

        Returns:
            list[TimeValue]: ``cycle_count`` strictly increasing values.
        """
        s = self._settings
        point = wake.plus_minutes(-s.fall_asleep_buffer_minutes)
        candidates = []
        for _ in range(s.cycle_count):
            point = point.plus_minutes(-s.sleep_cycle_minutes)
            candidates.append(point)

        candidates.sort(key=lambda tv: tv.instant_millis)
        unique: list[TimeValue] = []
        for tv in candidates:
            if not unique or unique[-1].instant_millis != tv.instant_millis:
                unique.append(tv)
        return unique

    def suggest_text(self, wake: TimeValue, mode: FormatMode, formatter: TimeFormatter) -> str:
        """Comma-separated suggestions rendered in *mode*, earliest first."""
        text = SEPARATOR.join(formatter.render_short(tv, mode) for tv in self.suggest(wake))
        logger.debug("Sleep suggestions for %s: %s", wake, text)
        return text
