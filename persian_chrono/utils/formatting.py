from datetime import timedelta
import re
from typing import Optional, Tuple

from persiantools import digits

from .exceptions import InvalidDateError

_DATE_RE = re.compile(r'^\s*(-?\d+)[-/](\d{1,2})[-/](\d{1,2})\s*$')

def format_offset(offset: timedelta) -> str:
    """Format a UTC offset as +HH:MM (seconds appended only when present)"""
    sign = '-' if offset < timedelta(0) else '+'
    seconds = abs(int(offset.total_seconds()))
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text

def format_jalali_date(year: int, month: int, day: int, sep: str = '-') -> str:
    """Format a Jalali date as YYYY-MM-DD"""
    return f"{year:04d}{sep}{month:02d}{sep}{day:02d}"

def format_persian_datetime(date_parts: Tuple[int, int, int], hour: int, minute: int,
                            second: int, suffix: Optional[str] = None) -> str:
    """Format a Jalali date and time as YYYY-MM-DD HH:MM:SS with an optional zone suffix.

    Args:
        date_parts: Jalali (year, month, day)
        hour, minute, second: Clock fields, shown unchanged
        suffix: 'UTC', a '+HH:MM' offset, or None for naive values

    Returns:
        str: The rendered value, e.g. '1403-08-20 22:38:28 UTC'
    """
    text = f"{format_jalali_date(*date_parts)} {hour:02d}:{minute:02d}:{second:02d}"
    if suffix:
        text += f" {suffix}"
    return text

def parse_jalali_date(text: str) -> Tuple[int, int, int]:
    """Parse 'YYYY-MM-DD' or 'YYYY/MM/DD' into a (year, month, day) tuple.

    Persian and Arabic-Indic digits are accepted. Only the shape is checked
    here, calendar validity is left to the caller.
    """
    normalized = digits.fa_to_en(digits.ar_to_fa(str(text)))
    match = _DATE_RE.match(normalized)
    if not match:
        raise InvalidDateError(f"Unsupported Jalali date string: {text!r}")
    year, month, day = (int(part) for part in match.groups())
    return year, month, day
