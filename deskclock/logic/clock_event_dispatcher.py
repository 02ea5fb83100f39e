"""
ClockEventDispatcher – routes host clock notifications to ClockEngine.

Ticks, wall-clock changes and timezone changes refresh a live engine and are
ignored while it is fixed; format changes always recompute the 12-/24-hour
mode. Render listeners receive the new RenderedTime after each re-render.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from core.common.clock_events import ClockEvent, ClockEventType
from core.contracts.clock import IClockEventSource
from deskclock.logic.clock_engine import ClockEngine
from deskclock.models.rendered_time import RenderedTime

logger = logging.getLogger(__name__)

RenderListener = Callable[[RenderedTime], None]

_REFRESH_EVENTS = {
    ClockEventType.TIME_TICK,
    ClockEventType.TIME_CHANGED,
    ClockEventType.TIMEZONE_CHANGED,
}


class ClockEventDispatcher:
    """Subscribes to an IClockEventSource on behalf of one engine."""

    def __init__(self, engine: ClockEngine, listeners: Iterable[RenderListener] = ()) -> None:
        self._engine = engine
        self._listeners: list[RenderListener] = list(listeners)
        self._source: Optional[IClockEventSource] = None

    def add_listener(self, listener: RenderListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: RenderListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def attach(self, source: IClockEventSource) -> RenderedTime:
        """Subscribe to *source* and render once."""
        if self._source is not None:
            self.detach()
        self._source = source
        source.subscribe(self.dispatch)
        rendered = self._engine.update_now()
        self._notify(rendered)
        return rendered

    def detach(self) -> None:
        if self._source is None:
            return
        self._source.unsubscribe(self.dispatch)
        self._source = None

    def dispatch(self, event: ClockEvent) -> RenderedTime:
        if event.type is ClockEventType.FORMAT_CHANGED:
            rendered = self._engine.on_format_preference_changed(event.use_24_hour)
        elif event.type in _REFRESH_EVENTS:
            if not self._engine.is_live and self._engine.rendered is not None:
                return self._engine.rendered
            rendered = self._engine.update_now()
        else:
            raise ValueError(f"Unknown clock event type: {event.type!r}")
        self._notify(rendered)
        return rendered

    def _notify(self, rendered: RenderedTime) -> None:
        for listener in list(self._listeners):
            try:
                listener(rendered)
            except Exception:
                logger.exception("Render listener %r failed", listener)
