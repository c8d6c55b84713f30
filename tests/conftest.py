"""
Shared fixtures for the persian_chrono test suite.

Provides the leap rules, the reference leap-year table and the Tehran zone.
"""

import pytest
import pytz

from persian_chrono import BirashkRule, ThirtyThreeYearRule


# Leap years of one full 33-year cycle plus its neighbours (1375..1441 AP),
# as published for the Iranian calendar.
JALALI_LEAP_YEARS = {
    1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403,
    1408, 1412, 1416, 1420, 1424, 1428, 1432, 1436, 1441,
}


@pytest.fixture(params=[ThirtyThreeYearRule, BirashkRule], ids=["33-year", "2820-year"])
def rule(request):
    """Every available leap rule, one test run each."""
    return request.param()


@pytest.fixture
def leap_years():
    return JALALI_LEAP_YEARS


@pytest.fixture
def tehran():
    return pytz.timezone("Asia/Tehran")
