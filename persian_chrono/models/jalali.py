from dataclasses import dataclass
from datetime import date, time, timedelta
import enum
from typing import Optional

from ..core.converter import gregorian_to_jalali, is_leap, jalali_to_gregorian
from ..utils.exceptions import InvalidDateError, OutOfRangeError
from ..utils.formatting import (
    format_jalali_date, format_offset, format_persian_datetime, parse_jalali_date
)
from ..utils.validators import jalali_month_length

class InputShape(enum.Enum):
    """The datetime shapes ``to_persian`` understands"""
    NAIVE = "naive"
    UTC = "utc"
    ZONED = "zoned"

@dataclass(frozen=True, order=True)
class JalaliDate:
    year: int
    month: int
    day: int

    def __post_init__(self):
        if self.year < 1:
            raise OutOfRangeError(f"Jalali year {self.year} precedes the epoch",
                                  (self.year, self.month, self.day))
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Jalali month must be in 1..12, got {self.month}",
                                   (self.year, self.month, self.day))
        max_day = jalali_month_length(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise InvalidDateError(
                f"Jalali day must be in 1..{max_day} for {self.year:04d}-{self.month:02d}, "
                f"got {self.day}",
                (self.year, self.month, self.day)
            )

    def __iter__(self):
        return iter((self.year, self.month, self.day))

    def __str__(self) -> str:
        return self.isoformat()

    @classmethod
    def from_gregorian(cls, value: date) -> "JalaliDate":
        """Build the Jalali date for a ``datetime.date``."""
        return cls(*gregorian_to_jalali(value.year, value.month, value.day))

    @classmethod
    def fromisoformat(cls, text: str) -> "JalaliDate":
        return cls(*parse_jalali_date(text))

    @property
    def is_leap(self) -> bool:
        return is_leap(self.year)

    @property
    def days_in_month(self) -> int:
        return jalali_month_length(self.year, self.month)

    @property
    def day_of_year(self) -> int:
        """1 for 1 Farvardin, up to 365/366 for the last day of Esfand."""
        if self.month <= 6:
            return (self.month - 1) * 31 + self.day
        return 186 + (self.month - 7) * 30 + self.day

    def isoformat(self, sep: str = '-') -> str:
        return format_jalali_date(self.year, self.month, self.day, sep)

    def to_gregorian(self) -> date:
        return date(*jalali_to_gregorian(self.year, self.month, self.day))

@dataclass(frozen=True)
class PersianDateTime:
    """A Jalali calendar date with the source value's clock fields and offset"""
    date: JalaliDate
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0
    utcoffset: Optional[timedelta] = None
    shape: InputShape = InputShape.NAIVE

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def is_aware(self) -> bool:
        return self.utcoffset is not None

    def time(self) -> time:
        return time(self.hour, self.minute, self.second, self.microsecond)

    @property
    def zone_suffix(self) -> Optional[str]:
        """'UTC' for UTC values, '+HH:MM' for zoned ones, None when naive."""
        if self.shape is InputShape.UTC:
            return "UTC"
        if self.shape is InputShape.ZONED and self.utcoffset is not None:
            return format_offset(self.utcoffset)
        return None

    def __str__(self) -> str:
        return format_persian_datetime(tuple(self.date), self.hour, self.minute,
                                       self.second, self.zone_suffix)
