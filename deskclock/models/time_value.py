"""
Immutable point in time plus an optional timezone override.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

MILLIS_PER_MINUTE = 60_000


@dataclass(frozen=True, slots=True)
class TimeValue:
    """
    Attributes:
        instant_millis (int): Milliseconds since the epoch (UTC).
        timezone_override (str, optional): IANA zone id used for rendering
            instead of the ambient zone. Unknown ids render in the ambient zone.
    """
    instant_millis: int
    timezone_override: Optional[str] = None

    def with_instant(self, instant_millis: int) -> "TimeValue":
        return replace(self, instant_millis=instant_millis)

    def with_override(self, timezone_override: Optional[str]) -> "TimeValue":
        return replace(self, timezone_override=timezone_override or None)

    def plus_minutes(self, minutes: int) -> "TimeValue":
        return replace(self, instant_millis=self.instant_millis + minutes * MILLIS_PER_MINUTE)
