"""
Run configuration and input validation.

Year and destination are validated here, before any schedule is generated,
so a rejected run never touches the output file.
"""

import logging
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional, Union

from .exceptions import InvalidYearError, UnwritableDestinationError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "payroll.csv"
YEAR_WINDOW = 20

OUTPUT_ENV = "PAYROLL_SCHEDULE_FILE"
YEAR_ENV = "PAYROLL_SCHEDULE_YEAR"


def default_year(today: Optional[date] = None) -> int:
    """Year from ``PAYROLL_SCHEDULE_YEAR``, else the current year."""
    value = os.getenv(YEAR_ENV)
    if value:
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{YEAR_ENV} must be an integer, got {value!r}") from exc
    return (today or date.today()).year


def default_output() -> str:
    return os.getenv(OUTPUT_ENV, DEFAULT_OUTPUT)


def validate_year(year: int, today: Optional[date] = None) -> int:
    """Accept years strictly within ``YEAR_WINDOW`` years of the current one."""
    current = (today or date.today()).year
    lower = current - YEAR_WINDOW
    upper = current + YEAR_WINDOW
    if not lower < year < upper:
        raise InvalidYearError(year, lower, upper)
    return year


def validate_destination(path: Union[str, Path]) -> Path:
    """Check that ``path`` can be created or overwritten.

    The directory holding it must exist and be writable; an existing target
    must be a writable file.
    """
    path = Path(str(path).strip())
    directory = path.parent
    logger.debug("Checking write access to %s", directory.resolve())
    if not directory.is_dir() or not os.access(directory, os.W_OK):
        raise UnwritableDestinationError(path, directory)
    if path.is_dir() or (path.exists() and not os.access(path, os.W_OK)):
        raise UnwritableDestinationError(path, directory)
    return path


@dataclass(frozen=True)
class ScheduleConfig:
    """Validated inputs for one schedule run."""

    year: int
    output_path: Path

    @classmethod
    def from_values(
        cls,
        year: Optional[int] = None,
        output_path: Union[str, Path, None] = None,
        today: Optional[date] = None,
    ) -> "ScheduleConfig":
        """
        Build a configuration, filling defaults and validating both values.

        Raises:
            InvalidYearError: year outside the supported window
            UnwritableDestinationError: output directory not writable
        """
        if year is None:
            year = default_year(today)
        if output_path is None or not str(output_path).strip():
            output_path = default_output()

        return cls(
            year=validate_year(int(year), today),
            output_path=validate_destination(output_path),
        )
