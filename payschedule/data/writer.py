"""
Concrete table writer implementations.
"""

import logging
from pathlib import Path
from typing import Union

from payschedule.exceptions import EmptyScheduleError
from payschedule.schedule.core import Schedule

logger = logging.getLogger(__name__)


class CsvTableWriter:
    """
    Write a schedule as comma separated values.

    The first record is the ``Month,Salary,Bonus`` header followed by one
    record per month. An existing file at the destination is truncated.
    """

    def __init__(self, sep: str = ",", encoding: str = "utf-8"):
        self.sep = sep
        self.encoding = encoding

    def write(self, schedule: Schedule, destination: Union[str, Path]) -> Path:
        if schedule.is_empty:
            raise EmptyScheduleError("Can not save payroll as no data is available.")

        path = Path(destination)
        frame = schedule.to_frame()
        frame.to_csv(
            path,
            sep=self.sep,
            index=False,
            mode="w",
            encoding=self.encoding,
            lineterminator="\n",
        )
        logger.debug("Wrote %s payroll rows for %s to %s", len(frame), schedule.year, path)
        return path
