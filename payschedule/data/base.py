"""
Base abstractions for persisting schedules.
"""

from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from payschedule.schedule.core import Schedule


@runtime_checkable
class TableWriter(Protocol):
    """
    Protocol for schedule writers.

    Any object that can persist a generated schedule to a destination
    (file, stream, remote store) satisfies this interface.
    """

    def write(self, schedule: Schedule, destination: Union[str, Path]) -> Path:
        """
        Persist the schedule.

        Args:
            schedule: Generated schedule with its 12 rows
            destination: Where to write; existing content is replaced

        Returns:
            Path that was written
        """
        ...
