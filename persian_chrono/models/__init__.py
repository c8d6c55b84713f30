"""Value types produced by the converters."""
from .jalali import InputShape, JalaliDate, PersianDateTime

__all__ = ['InputShape', 'JalaliDate', 'PersianDateTime']
