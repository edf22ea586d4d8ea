"""
Basic types and enums used across the scheduling system.
"""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def is_weekend(self) -> bool:
        return self >= Weekday.SATURDAY


class RollDirection(Enum):
    """Direction in which a weekend date is moved."""

    BACKWARD = "BACKWARD"  # most recent target weekday
    FORWARD = "FORWARD"  # first target weekday strictly after
