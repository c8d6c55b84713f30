from datetime import date

from ..core.leap import LeapRule, default_rule

def jalali_month_length(year: int, month: int, rule: LeapRule = None) -> int:
    """Days in a Jalali month: 31 for 1-6, 30 for 7-11, 29/30 for Esfand."""
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if (rule or default_rule()).is_leap(year) else 29

def is_valid_gregorian(year: int, month: int, day: int) -> bool:
    """Validate a proleptic Gregorian date."""
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True

def is_valid_jalali(year: int, month: int, day: int, rule: LeapRule = None) -> bool:
    """Validate a Jalali date under the given leap rule."""
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= jalali_month_length(year, month, rule)
