"""
12-/24-hour rendering mode derived from the user preference.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

HOURS_24 = "kk"
HOURS_12 = "h"


@dataclass(frozen=True, slots=True)
class FormatMode:
    use_24_hour: bool = False

    @classmethod
    def from_preference(cls, use_24_hour: Optional[bool]) -> "FormatMode":
        """An absent preference means 12-hour mode with meridiem."""
        return cls(use_24_hour=bool(use_24_hour))

    def shows_meridiem(self) -> bool:
        return not self.use_24_hour

    @property
    def hours_pattern(self) -> str:
        return HOURS_24 if self.use_24_hour else HOURS_12
