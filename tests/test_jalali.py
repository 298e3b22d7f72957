# tests/test_jalali.py

from datetime import date, timedelta

import pytest

from caljalali.core.errors import InvalidDateError
from caljalali.engines.jalali import (
    gregorian_to_jalali,
    is_cycle_leap_jalali,
    is_leap_jalali,
    jalali_days_in_month,
    jalali_month_length,
    jalali_to_gregorian,
)


@pytest.mark.parametrize(
    "jalali, greg",
    [
        ((1400, 1, 1), (2021, 3, 21)),
        ((1403, 1, 1), (2024, 3, 20)),
        ((1404, 1, 1), (2025, 3, 21)),
        ((1403, 12, 30), (2025, 3, 20)),
        ((1404, 11, 1), (2026, 1, 21)),
        ((1399, 12, 30), (2021, 3, 20)),
    ],
)
def test_fixed_points(jalali, greg):
    assert jalali_to_gregorian(*jalali) == greg
    assert gregorian_to_jalali(*greg) == jalali


APPROX_ONLY_ESFAND_30 = [(1404, 12, 30), (1437, 12, 30), (1470, 12, 30)]


def test_jalali_roundtrip_1300_1500():
    skipped = []
    for jy in range(1300, 1501):
        for jm in range(1, 13):
            for jd in range(1, jalali_days_in_month(jy, jm) + 1):
                back = gregorian_to_jalali(*jalali_to_gregorian(jy, jm, jd))
                if back != (jy, jm, jd):
                    skipped.append((jy, jm, jd))
    assert skipped == APPROX_ONLY_ESFAND_30


@pytest.mark.parametrize("jalali", APPROX_ONLY_ESFAND_30)
def test_approx_only_esfand_30_lands_on_nowruz(jalali):
    jy = jalali[0]
    assert is_leap_jalali(jy) and not is_cycle_leap_jalali(jy)
    assert jalali_to_gregorian(*jalali) == jalali_to_gregorian(jy + 1, 1, 1)


def test_gregorian_pivot_roundtrip():
    d = date(1921, 3, 21)
    end = date(2121, 3, 21)
    while d <= end:
        g = (d.year, d.month, d.day)
        assert jalali_to_gregorian(*gregorian_to_jalali(*g)) == g
        d += timedelta(days=1)


def test_consecutive_days_are_consecutive():
    prev = gregorian_to_jalali(2020, 1, 1)
    d = date(2020, 1, 2)
    for _ in range(3 * 366):
        cur = gregorian_to_jalali(d.year, d.month, d.day)
        if cur[2] == 1:
            assert prev[2] == jalali_month_length(prev[0], prev[1])
        else:
            assert cur == (prev[0], prev[1], prev[2] + 1)
        prev = cur
        d += timedelta(days=1)


def test_days_in_month_uses_approximate_leap_rule():
    for jy in range(1300, 1501):
        expected = 30 if ((jy + 38) * 31) % 128 <= 30 else 29
        assert jalali_days_in_month(jy, 12) == expected
        for jm in range(1, 7):
            assert jalali_days_in_month(jy, jm) == 31
        for jm in range(7, 12):
            assert jalali_days_in_month(jy, jm) == 30


def test_cycle_leap_matches_year_length():
    for jy in range(1300, 1501):
        start = date(*jalali_to_gregorian(jy, 1, 1))
        nxt = date(*jalali_to_gregorian(jy + 1, 1, 1))
        assert (nxt - start).days == (366 if is_cycle_leap_jalali(jy) else 365)


def test_leap_rules_diverge_1403_1404():
    # 1403 has 30 Esfand in the converters, the approximation moves it to 1404
    assert is_cycle_leap_jalali(1403) and not is_leap_jalali(1403)
    assert is_leap_jalali(1404) and not is_cycle_leap_jalali(1404)
    assert jalali_days_in_month(1404, 12) == 30
    assert jalali_days_in_month(1403, 12) == 29
    assert jalali_to_gregorian(1404, 12, 30) == (2026, 3, 21)
    assert jalali_to_gregorian(1403, 12, 30) == (2025, 3, 20)


def test_leap_rules_agree_1399():
    assert is_leap_jalali(1399) and is_cycle_leap_jalali(1399)


@pytest.mark.parametrize("ymd", [(1405, 12, 30), (1404, 12, 31), (1404, 0, 1), (1404, 13, 1), (1404, 1, 32), (1404, 7, 31), (1404, 1, 0)])
def test_invalid_jalali(ymd):
    with pytest.raises(InvalidDateError):
        jalali_to_gregorian(*ymd)


def test_invalid_month_in_days_in_month():
    with pytest.raises(InvalidDateError):
        jalali_days_in_month(1404, 13)
