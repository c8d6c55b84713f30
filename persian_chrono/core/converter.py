"""Gregorian <-> Jalali conversion over plain (year, month, day) tuples.

Both directions go through a shared day line: the Gregorian ordinal
(``date.toordinal()`` numbering) on one side, days since 1 Farvardin 1 AP on
the other. The leap rule decides where each Jalali year starts.

Supported span: from 1 Farvardin 1 AP up to Gregorian 9999-12-31.
"""
from typing import Tuple

from . import gregorian
from .leap import LeapRule, default_rule
from ..utils.exceptions import InvalidDateError, OutOfRangeError
from ..utils.logger import CustomLogger
from ..utils.validators import is_valid_gregorian, is_valid_jalali

# Initialize logger
logger = CustomLogger("Converter")

# Farvardin..Shahrivar have 31 days, Mehr..Bahman 30
_FIRST_HALF_DAYS = 6 * 31


def is_leap(year: int, rule: LeapRule = None) -> bool:
    """Whether the Jalali ``year`` has 366 days."""
    return (rule or default_rule()).is_leap(year)


def _day_of_year_to_month_day(day_of_year: int) -> Tuple[int, int]:
    if day_of_year < _FIRST_HALF_DAYS:
        return 1 + day_of_year // 31, 1 + day_of_year % 31
    rest = day_of_year - _FIRST_HALF_DAYS
    return 7 + rest // 30, 1 + rest % 30


def _month_day_to_day_of_year(month: int, day: int) -> int:
    if month <= 6:
        return (month - 1) * 31 + day - 1
    return _FIRST_HALF_DAYS + (month - 7) * 30 + day - 1


def gregorian_to_jalali(year: int, month: int, day: int,
                        rule: LeapRule = None) -> Tuple[int, int, int]:
    """Convert a proleptic Gregorian date to a Jalali (year, month, day).

    Raises:
        InvalidDateError: the Gregorian date does not exist.
        OutOfRangeError: the date precedes the Jalali epoch or is past
            9999-12-31.
    """
    rule = rule or default_rule()
    value = (year, month, day)
    if not gregorian.MIN_YEAR <= year <= gregorian.MAX_YEAR:
        raise OutOfRangeError(f"Gregorian year {year} is outside "
                              f"{gregorian.MIN_YEAR}..{gregorian.MAX_YEAR}", value)
    if not is_valid_gregorian(year, month, day):
        raise InvalidDateError(f"Not a Gregorian date: {year:04d}-{month:02d}-{day:02d}", value)

    ordinal = gregorian.to_ordinal(year, month, day)
    if ordinal < rule.epoch_ordinal:
        raise OutOfRangeError(f"Gregorian date {year:04d}-{month:02d}-{day:02d} "
                              "precedes the Jalali epoch", value)

    jy, day_of_year = rule.year_from_days(ordinal - rule.epoch_ordinal)
    jm, jd = _day_of_year_to_month_day(day_of_year)
    logger.debug("gregorian %s -> jalali %s (%r)", value, (jy, jm, jd), rule)
    return jy, jm, jd


def jalali_to_gregorian(year: int, month: int, day: int,
                        rule: LeapRule = None) -> Tuple[int, int, int]:
    """Convert a Jalali date to a proleptic Gregorian (year, month, day).

    Raises:
        InvalidDateError: month/day is not a legal day of that Jalali year.
        OutOfRangeError: the year is before 1 AP or the result is past
            9999-12-31.
    """
    rule = rule or default_rule()
    value = (year, month, day)
    if year < 1:
        raise OutOfRangeError(f"Jalali year {year} precedes the epoch", value)
    if not is_valid_jalali(year, month, day, rule):
        raise InvalidDateError(f"Not a Jalali date: {year:04d}-{month:02d}-{day:02d}", value)

    ordinal = (rule.epoch_ordinal + rule.days_before_year(year)
               + _month_day_to_day_of_year(month, day))
    if ordinal > gregorian.MAX_ORDINAL:
        raise OutOfRangeError(f"Jalali date {year:04d}-{month:02d}-{day:02d} "
                              "is past Gregorian 9999-12-31", value)

    result = gregorian.from_ordinal(ordinal)
    logger.debug("jalali %s -> gregorian %s (%r)", value, result, rule)
    return result
