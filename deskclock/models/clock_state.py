"""
Snapshot of a ClockEngine's state.
"""

from __future__ import annotations

from dataclasses import dataclass

from deskclock.models.format_mode import FormatMode
from deskclock.models.time_value import TimeValue


@dataclass(frozen=True, slots=True)
class ClockState:
    """
    Attributes:
        current (TimeValue): Value shown by the clock.
        is_live (bool): Refresh *current* from the system clock on update.
        format_mode (FormatMode): Active 12-/24-hour mode.
    """
    current: TimeValue
    is_live: bool
    format_mode: FormatMode
