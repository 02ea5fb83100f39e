"""core/contracts/clock.py
=========================

Clock notification contracts.

The host application implements the event source (it owns OS broadcast and
preference-observer registration). Features only consume it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from core.common.clock_events import ClockEvent

ClockEventCallback = Callable[[ClockEvent], None]


class IClockEventSource(ABC):
    """Delivers clock notifications on the subscriber's thread."""

    @abstractmethod
    def subscribe(self, callback: ClockEventCallback) -> None:
        """Register a callback for all clock events."""

    @abstractmethod
    def unsubscribe(self, callback: ClockEventCallback) -> None:
        """Remove a previously registered callback."""
