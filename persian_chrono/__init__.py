"""Convert dates between the Gregorian and Persian (Jalali) calendars.

    >>> from datetime import datetime
    >>> from persian_chrono import to_persian
    >>> str(to_persian(datetime(2024, 11, 9, 23, 7)))
    '1403-08-19 23:07:00'
"""
from .utils.exceptions import CalendarError, ConfigError, InvalidDateError, OutOfRangeError
from .config import Config
from .core.leap import BirashkRule, LeapRule, ThirtyThreeYearRule, get_rule
from .core.converter import gregorian_to_jalali, is_leap, jalali_to_gregorian
from .utils.validators import jalali_month_length
from .utils.formatting import (
    format_jalali_date, format_offset, format_persian_datetime, parse_jalali_date
)
from .models import InputShape, JalaliDate, PersianDateTime
from .adapters import classify, to_persian

__version__ = "0.1.0"

__all__ = [
    'BirashkRule', 'CalendarError', 'Config', 'ConfigError', 'InputShape',
    'InvalidDateError', 'JalaliDate', 'LeapRule', 'OutOfRangeError',
    'PersianDateTime', 'ThirtyThreeYearRule', 'classify', 'format_jalali_date',
    'format_offset', 'format_persian_datetime', 'get_rule', 'gregorian_to_jalali',
    'is_leap', 'jalali_month_length', 'jalali_to_gregorian', 'parse_jalali_date',
    'to_persian',
]
