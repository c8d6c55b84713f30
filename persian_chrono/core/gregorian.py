"""Proleptic Gregorian day ordinals on top of ``datetime.date``.

Ordinals use the numbering of ``datetime.date.toordinal()``:
0001-01-01 is day 1.
"""
from datetime import MAXYEAR, MINYEAR, date
from typing import Tuple

MIN_YEAR = MINYEAR
MAX_YEAR = MAXYEAR

MIN_ORDINAL = date.min.toordinal()
MAX_ORDINAL = date.max.toordinal()


def to_ordinal(year: int, month: int, day: int) -> int:
    return date(year, month, day).toordinal()


def from_ordinal(ordinal: int) -> Tuple[int, int, int]:
    """Inverse of ``to_ordinal``."""
    day = date.fromordinal(ordinal)
    return day.year, day.month, day.day
