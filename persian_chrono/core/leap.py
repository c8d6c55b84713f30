"""Jalali leap-year rules.

A rule owns the layout of Jalali years on the day line: how many days
separate the Jalali epoch (1 Farvardin 1 AP) from each Nowruz. Converters
only talk to this interface, so rules can be swapped without touching them.
"""
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Tuple

from ..config import Config
from ..utils.exceptions import ConfigError

# Mean Jalali year is close to 12053 / 33 days
_CYCLE_33_DAYS = 33 * 365 + 8


class LeapRule(ABC):
    """Interface for Jalali leap-year rules."""

    name = None
    # Gregorian ordinal (date.toordinal numbering) of 1 Farvardin 1 AP
    epoch_ordinal = None

    @abstractmethod
    def days_before_year(self, year: int) -> int:
        """Days from 1 Farvardin 1 AP to 1 Farvardin of ``year``."""

    def is_leap(self, year: int) -> bool:
        return self.days_before_year(year + 1) - self.days_before_year(year) == 366

    def year_from_days(self, days: int) -> Tuple[int, int]:
        """Split days since the epoch into (year, zero-based day of year)."""
        year = days * 33 // _CYCLE_33_DAYS + 1
        while self.days_before_year(year) > days:
            year -= 1
        while self.days_before_year(year + 1) <= days:
            year += 1
        return year, days - self.days_before_year(year)

    def __repr__(self):
        return f"<{self.__class__.__name__}>"


class ThirtyThreeYearRule(LeapRule):
    """33-year arithmetic cycle with 8 leap years.

    Matches the observed vernal-equinox calendar for roughly 1178-1634 AP.
    """

    name = '33'
    epoch_ordinal = 226895  # 622-03-21
    LEAP_POSITIONS = (1, 5, 9, 13, 17, 22, 26, 30)

    def is_leap(self, year: int) -> bool:
        return year % 33 in self.LEAP_POSITIONS

    def days_before_year(self, year: int) -> int:
        cycles, position = divmod(year - 1, 33)
        leaps = cycles * 8 + sum(1 for p in self.LEAP_POSITIONS if p <= position)
        return (year - 1) * 365 + leaps

    def year_from_days(self, days: int) -> Tuple[int, int]:
        cycles, days = divmod(days, _CYCLE_33_DAYS)
        year = cycles * 33 + 1
        for _ in range(32):
            length = 366 if self.is_leap(year) else 365
            if days < length:
                break
            days -= length
            year += 1
        return year, days


class BirashkRule(LeapRule):
    """2820-year cycle arithmetic (Birashk).

    Diverges from the 33-year rule in some years, e.g. it puts the leap day
    in 1404 rather than 1403.
    """

    name = '2820'
    epoch_ordinal = 226896  # 622-03-22
    _CYCLE_DAYS = 1029983

    def _absolute_days(self, year: int) -> int:
        base = year - 474
        epoch_year = 474 + base % 2820
        return ((epoch_year * 682 - 110) // 2816
                + (epoch_year - 1) * 365
                + base // 2820 * self._CYCLE_DAYS)

    def days_before_year(self, year: int) -> int:
        return self._absolute_days(year) - self._absolute_days(1)


RULES = {
    ThirtyThreeYearRule.name: ThirtyThreeYearRule,
    BirashkRule.name: BirashkRule,
}


def get_rule(name: str) -> LeapRule:
    """Build a leap rule from its configuration name ('33' or '2820')."""
    try:
        return RULES[str(name).strip()]()
    except KeyError:
        raise ConfigError(f"Unknown leap rule: {name!r}, expected one of {sorted(RULES)}")


@lru_cache(maxsize=None)
def default_rule() -> LeapRule:
    """The rule named by ``Config.LEAP_RULE``, built once."""
    return get_rule(Config.LEAP_RULE)
