"""
Constants driving the sleep-time suggestions.
"""

from __future__ import annotations

from dataclasses import dataclass

from deskclock.exceptions.errors import InvalidConfiguration

SLEEP_CYCLE_MINUTES = 90
FALL_ASLEEP_BUFFER_MINUTES = 194
CYCLE_COUNT = 4


@dataclass(frozen=True, slots=True)
class SleepSettings:
    """
    Attributes:
        fall_asleep_buffer_minutes (int): Subtracted once from the wake time.
        sleep_cycle_minutes (int): Length of one sleep cycle.
        cycle_count (int): Number of suggestions to produce.
    """
    fall_asleep_buffer_minutes: int = FALL_ASLEEP_BUFFER_MINUTES
    sleep_cycle_minutes: int = SLEEP_CYCLE_MINUTES
    cycle_count: int = CYCLE_COUNT

    def validate(self) -> "SleepSettings":
        if self.sleep_cycle_minutes <= 0:
            raise InvalidConfiguration(
                f"sleep_cycle_minutes must be positive, got {self.sleep_cycle_minutes}"
            )
        if self.cycle_count <= 0:
            raise InvalidConfiguration(f"cycle_count must be positive, got {self.cycle_count}")
        if self.fall_asleep_buffer_minutes < 0:
            raise InvalidConfiguration(
                f"fall_asleep_buffer_minutes must not be negative, "
                f"got {self.fall_asleep_buffer_minutes}"
            )
        return self
