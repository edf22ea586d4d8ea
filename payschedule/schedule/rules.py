"""
Payment rules for the salary and bonus legs of the payroll.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from payschedule.conventions.types import RollDirection, Weekday

from .adjustments import adjust_date, get_month_end, weekday_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentRule:
    """Anchor day of the month plus the weekend roll applied to it.

    ``anchor_day`` of ``None`` anchors the payment on the last day of the month.
    """

    name: str
    anchor_day: Optional[int]
    direction: RollDirection
    target: Weekday

    def __post_init__(self):
        if self.anchor_day is not None and not 1 <= self.anchor_day <= 28:
            raise ValueError(
                f"anchor_day must be in 1..28 or None, got {self.anchor_day}"
            )
        if self.target.is_weekend:
            raise ValueError(f"Roll target must be a weekday, got {self.target.name}")

    def anchor(self, year: int, month: int) -> date:
        """Unadjusted payment date for the month."""
        if self.anchor_day is None:
            return get_month_end(year, month)
        return date(year, month, self.anchor_day)

    def pay_date(self, year: int, month: int) -> date:
        """Payment date for the month after weekend adjustment."""
        unadjusted = self.anchor(year, month)
        adjusted = adjust_date(unadjusted, self.direction, self.target)
        if adjusted != unadjusted:
            logger.debug(
                "%s %s falls on %s, paid %s",
                self.name,
                unadjusted,
                weekday_of(unadjusted).name,
                adjusted,
            )
        return adjusted


# Base salary: last day of the month, Friday before when that is a weekend
SALARY_RULE = PaymentRule(
    name="salary",
    anchor_day=None,
    direction=RollDirection.BACKWARD,
    target=Weekday.FRIDAY,
)

# Bonus: the 15th, first Wednesday after when that is a weekend
BONUS_RULE = PaymentRule(
    name="bonus",
    anchor_day=15,
    direction=RollDirection.FORWARD,
    target=Weekday.WEDNESDAY,
)


def salary_pay_date(year: int, month: int) -> date:
    """Base salary payment date for the given month."""
    pay_date = SALARY_RULE.pay_date(year, month)
    # Rolling back at most two days from a month end cannot leave the month
    if pay_date.month != month:
        raise RuntimeError(
            f"Salary date {pay_date} left month {month} of {year}"
        )
    return pay_date


def bonus_pay_date(year: int, month: int) -> date:
    """Bonus payment date for the given month.

    The bonus covers the previous month's work but is dated from the current
    month's 15th.
    """
    return BONUS_RULE.pay_date(year, month)
