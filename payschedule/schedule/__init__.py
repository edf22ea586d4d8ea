"""Payment rules, weekend adjustments and the schedule generator."""

from payschedule.conventions.types import RollDirection, Weekday

from .adjustments import (
    adjust_date,
    get_month_end,
    is_weekend,
    last_day_of_month,
    roll_back_to,
    roll_forward_to,
    weekday_of,
)
from .core import Schedule, ScheduleRow
from .generator import ScheduleGenerator, generate
from .rules import (
    BONUS_RULE,
    SALARY_RULE,
    PaymentRule,
    bonus_pay_date,
    salary_pay_date,
)

__all__ = [
    # Conventions
    "RollDirection",
    "Weekday",
    # Adjustments
    "adjust_date",
    "get_month_end",
    "is_weekend",
    "last_day_of_month",
    "roll_back_to",
    "roll_forward_to",
    "weekday_of",
    # Rules
    "PaymentRule",
    "SALARY_RULE",
    "BONUS_RULE",
    "salary_pay_date",
    "bonus_pay_date",
    # Schedule
    "Schedule",
    "ScheduleRow",
    "ScheduleGenerator",
    "generate",
]
