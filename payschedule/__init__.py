"""Payroll Payment Schedule Generator.

This package computes the yearly salary and bonus payment dates for a sales
payroll and writes them out as a CSV table.

Key modules:
- schedule: Payment rules, weekend adjustments and the schedule generator
- conventions: Weekday and roll direction types
- data: Table writers for persisting a schedule
- config: Run configuration and input validation
- cli: Command line entry point
"""

from .exceptions import (
    EmptyScheduleError,
    InvalidYearError,
    PayrollScheduleError,
    UnwritableDestinationError,
)
from .schedule import Schedule, ScheduleGenerator, ScheduleRow, generate

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "generate",
    "Schedule",
    "ScheduleRow",
    "ScheduleGenerator",
    "PayrollScheduleError",
    "InvalidYearError",
    "UnwritableDestinationError",
    "EmptyScheduleError",
]
