"""
Main schedule generation logic.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from payschedule.exceptions import EmptyScheduleError
from payschedule.utils.date import month_name

from .core import Schedule, ScheduleRow
from .rules import bonus_pay_date, salary_pay_date

if TYPE_CHECKING:
    from payschedule.data import TableWriter

logger = logging.getLogger(__name__)


def generate(year: int) -> Schedule:
    """
    Generate the payment schedule for every month of ``year``.

    Args:
        year: Calendar year, already validated by the caller

    Returns:
        Schedule with 12 rows ordered January to December
    """
    rows = []
    for month in range(1, 13):
        row = ScheduleRow(
            month_name=month_name(month),
            salary_date=salary_pay_date(year, month),
            bonus_date=bonus_pay_date(year, month),
        )
        logger.debug(
            "%s %s: salary %s, bonus %s",
            row.month_name,
            year,
            row.salary_date,
            row.bonus_date,
        )
        rows.append(row)

    return Schedule(year=year, rows=tuple(rows))


class ScheduleGenerator:
    """Generates and saves the payroll schedule for one year."""

    def __init__(self, year: int):
        self.year = year
        self._schedule: Optional[Schedule] = None

    def generate(self) -> "ScheduleGenerator":
        """Compute the schedule; returns self so ``save`` can be chained."""
        self._schedule = generate(self.year)
        return self

    @property
    def schedule(self) -> Schedule:
        if self._schedule is None:
            raise EmptyScheduleError(
                "Can not access payroll schedule as no data is available; "
                "call generate() first."
            )
        return self._schedule

    def save(
        self,
        destination: Union[str, Path],
        writer: Optional["TableWriter"] = None,
    ) -> "ScheduleGenerator":
        """
        Write the generated schedule to ``destination``.

        Args:
            destination: Output file path, truncated if it exists
            writer: TableWriter to use (defaults to CsvTableWriter)
        """
        if self._schedule is None:
            raise EmptyScheduleError("Can not save payroll as no data is available.")

        if writer is None:
            # payschedule.data imports payschedule.schedule.core
            from payschedule.data import CsvTableWriter

            writer = CsvTableWriter()

        writer.write(self._schedule, destination)
        return self
