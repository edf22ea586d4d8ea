"""
Date adjustment functions for schedule generation.
"""

from datetime import date, datetime, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from payschedule.conventions.types import RollDirection, Weekday


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")

    return date(year, month, 1) + relativedelta(months=1, days=-1)


last_day_of_month = get_month_end


def weekday_of(dt: Union[date, datetime]) -> Weekday:
    """Day of the week of a date in the proleptic Gregorian calendar."""
    return Weekday(dt.weekday())


def is_weekend(dt: Union[date, datetime]) -> bool:
    return weekday_of(dt).is_weekend


def roll_back_to(dt: Union[date, datetime], target: Weekday) -> date:
    """Most recent ``target`` weekday on or before ``dt``."""
    if isinstance(dt, datetime):
        dt = dt.date()

    offset = (dt.weekday() - target) % 7
    return dt - timedelta(days=offset)


def roll_forward_to(dt: Union[date, datetime], target: Weekday) -> date:
    """First ``target`` weekday strictly after ``dt``."""
    if isinstance(dt, datetime):
        dt = dt.date()

    offset = (target - dt.weekday() - 1) % 7 + 1
    return dt + timedelta(days=offset)


def adjust_date(
    dt: Union[date, datetime], direction: RollDirection, target: Weekday
) -> date:
    """Move a weekend date to ``target`` in the given direction.

    Weekdays are returned unchanged.
    """
    if isinstance(dt, datetime):
        dt = dt.date()

    if not is_weekend(dt):
        return dt

    if direction == RollDirection.BACKWARD:
        return roll_back_to(dt, target)

    elif direction == RollDirection.FORWARD:
        return roll_forward_to(dt, target)

    else:
        raise ValueError(f"Unknown roll direction: {direction}")
