"""
core/common/clock_events.py

Defines event objects for clock notifications.

Delivery (OS time ticks, timezone broadcasts, preference observers) is owned by
the host. Features subscribe to these events to react without direct coupling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class ClockEventType(str, Enum):
    TIME_TICK = "time_tick"
    TIME_CHANGED = "time_changed"
    TIMEZONE_CHANGED = "timezone_changed"
    FORMAT_CHANGED = "format_changed"


@dataclass(frozen=True, slots=True)
class ClockEvent:
    """Represents a single clock notification."""

    type: ClockEventType
    use_24_hour: Optional[bool] = None  # only for FORMAT_CHANGED
    ts_utc: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
