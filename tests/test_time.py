# tests/test_time.py

import random
from datetime import date, timedelta

import pytest

from caljalali.core.errors import InvalidDateError
from caljalali.core.time import (
    from_jdn,
    gregorian_days_in_month,
    gregorian_to_jdn,
    gregorian_weekday,
    is_gregorian_leap,
    jdn_to_gregorian,
    to_jdn,
)


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert gregorian_to_jdn(2000, 1, 1) == 2451545
    # Unix epoch
    assert gregorian_to_jdn(1970, 1, 1) == 2440588
    assert jdn_to_gregorian(2451545) == (2000, 1, 1)


def test_jdn_roundtrip_random():
    random.seed(42)
    for _ in range(5000):
        jdn_in = random.randint(2378497, 2524594)  # roughly 1800 .. 2200
        assert gregorian_to_jdn(*jdn_to_gregorian(jdn_in)) == jdn_in


def test_jdn_matches_ordinal_days():
    d = date(1800, 1, 1)
    base = gregorian_to_jdn(1800, 1, 1)
    for step in (1, 59, 365, 366, 36524, 146097):
        d2 = d + timedelta(days=step)
        assert to_jdn(d2) - base == step
        assert from_jdn(base + step) == d2


@pytest.mark.parametrize("gy, leap", [(1900, False), (2000, True), (2023, False), (2024, True), (2100, False)])
def test_gregorian_leap_rule(gy, leap):
    assert is_gregorian_leap(gy) is leap
    assert gregorian_days_in_month(gy, 2) == (29 if leap else 28)


def test_weekday_sunday_zero():
    # 2024-03-20 was a Wednesday
    assert gregorian_weekday(2024, 3, 20) == 3
    d = date(1990, 1, 1)
    for i in range(400):
        x = d + timedelta(days=i)
        assert gregorian_weekday(x.year, x.month, x.day) == x.isoweekday() % 7


@pytest.mark.parametrize("ymd", [(2024, 0, 1), (2024, 13, 1), (2023, 2, 29), (2024, 4, 31), (2024, 1, 0)])
def test_invalid_gregorian(ymd):
    with pytest.raises(InvalidDateError):
        gregorian_to_jdn(*ymd)
    # also a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        gregorian_to_jdn(*ymd)
