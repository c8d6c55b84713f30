"""Adapters from ``datetime`` values to Persian (Jalali) values.

Datetimes come in three shapes (see ``InputShape``):

* naive and zoned: the value's own wall-clock date is converted;
* UTC: the calendar date is the day in force in the reference zone
  (``Config.REFERENCE_TIMEZONE``, Asia/Tehran by default) at that instant.

In every shape hour, minute, second, microsecond and the UTC offset are
carried over from the source value unchanged.
"""
from datetime import date, datetime, timedelta, timezone, tzinfo
from functools import singledispatch
from typing import Union

import pytz

from ..config import Config
from ..models.jalali import InputShape, JalaliDate, PersianDateTime
from ..utils.exceptions import OutOfRangeError
from ..utils.logger import CustomLogger, error_handler

# Initialize logger
logger = CustomLogger("Adapter")

_UTC_ZONES = (timezone.utc, pytz.utc)

def classify(value: datetime) -> InputShape:
    """Tell which of the supported shapes a datetime has"""
    offset = value.utcoffset()
    if offset is None:
        return InputShape.NAIVE
    if offset == timedelta(0) and (value.tzinfo in _UTC_ZONES or value.tzname() == "UTC"):
        return InputShape.UTC
    return InputShape.ZONED

def resolve_reference_tz(reference_tz: Union[str, tzinfo, None] = None) -> tzinfo:
    """Accept a tzinfo, a zone name, or None for the configured zone"""
    if isinstance(reference_tz, tzinfo):
        return reference_tz
    return Config.get_reference_timezone(reference_tz)

def _wall_clock_day(value: datetime, zone: tzinfo = None) -> date:
    # zone unused: the value's own clock decides the day
    return value.date()

def _reference_zone_day(value: datetime, zone: tzinfo) -> date:
    try:
        return value.astimezone(zone).date()
    except OverflowError:
        raise OutOfRangeError(f"{value.isoformat()} leaves the supported range in {zone}",
                              (value.year, value.month, value.day))

# One calendar-day policy per shape
_CALENDAR_DAY = {
    InputShape.NAIVE: _wall_clock_day,
    InputShape.UTC: _reference_zone_day,
    InputShape.ZONED: _wall_clock_day,
}

@singledispatch
def to_persian(value, reference_tz=None):
    """Convert a ``date`` or ``datetime`` to its Persian equivalent.

    Args:
        value: A ``datetime.date`` or ``datetime.datetime`` (naive, UTC or zoned)
        reference_tz: Zone whose calendar day is used for UTC datetimes;
            a tzinfo, a zone name, or None for ``Config.REFERENCE_TIMEZONE``

    Returns:
        JalaliDate for a date, PersianDateTime for a datetime

    Raises:
        OutOfRangeError: the date is outside the supported span
        ConfigError: ``reference_tz`` names an unknown zone
    """
    raise TypeError(f"Cannot convert {type(value).__name__} to a Persian date")

@to_persian.register(date)
@error_handler(logger)
def _date_to_persian(value: date, reference_tz=None) -> JalaliDate:
    return JalaliDate.from_gregorian(value)

@to_persian.register(datetime)
@error_handler(logger)
def _datetime_to_persian(value: datetime, reference_tz=None) -> PersianDateTime:
    shape = classify(value)
    zone = resolve_reference_tz(reference_tz) if shape is InputShape.UTC else None
    day = _CALENDAR_DAY[shape](value, zone)
    result = PersianDateTime(
        date=JalaliDate.from_gregorian(day),
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        microsecond=value.microsecond,
        utcoffset=value.utcoffset(),
        shape=shape,
    )
    logger.debug("%s (%s) -> %s", value.isoformat(), shape.value, result)
    return result
