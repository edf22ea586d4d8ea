"""
Output module for generated schedules.

Provides the writer abstraction and the CSV implementation.
"""

from .base import TableWriter
from .writer import CsvTableWriter

__all__ = [
    "TableWriter",
    "CsvTableWriter",
]
