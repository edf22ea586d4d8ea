"""
Core data structures for schedule generation.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterator, List, Tuple

import pandas as pd

from payschedule.utils.date import format_date

COLUMNS = ("Month", "Salary", "Bonus")


@dataclass(frozen=True)
class ScheduleRow:
    """Salary and bonus payment dates for a single month."""

    month_name: str
    salary_date: date
    bonus_date: date

    def as_record(self) -> Tuple[str, str, str]:
        """Row values as written to the output table."""
        return (
            self.month_name,
            format_date(self.salary_date),
            format_date(self.bonus_date),
        )


@dataclass(frozen=True)
class Schedule:
    """Ordered payment rows for one calendar year."""

    year: int
    rows: Tuple[ScheduleRow, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[ScheduleRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> ScheduleRow:
        return self.rows[index]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def records(self) -> List[Tuple[str, str, str]]:
        return [row.as_record() for row in self.rows]

    def to_dict(self) -> Dict[str, Dict[str, date]]:
        """Month name -> {'salary': date, 'bonus': date}."""
        return {
            row.month_name: {"salary": row.salary_date, "bonus": row.bonus_date}
            for row in self.rows
        }

    def to_frame(self) -> pd.DataFrame:
        """Schedule as a DataFrame with formatted date strings."""
        return pd.DataFrame(self.records(), columns=list(COLUMNS))
