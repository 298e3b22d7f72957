# tests/test_hijri.py

from datetime import date, timedelta

import pytest

import caljalali
from caljalali.core.errors import UnsupportedConversionError
from caljalali.core.time import gregorian_to_jdn
from caljalali.engines.hijri import (
    DEFAULT_HIJRI,
    HijriParams,
    astronomical_jd,
    calibrated_jd,
    gregorian_to_hijri,
    hijri_from_jd,
    hijri_to_gregorian,
    jalali_to_hijri,
)


def test_reference_alignment():
    """1 Bahman 1404 (2026-01-21) is calibrated to 1 Sha'ban 1447."""
    assert gregorian_to_hijri(2026, 1, 21) == (1447, 8, 1)
    assert jalali_to_hijri(1404, 11, 1) == (1447, 8, 1)


@pytest.mark.parametrize(
    "greg, hijri",
    [
        ((2025, 3, 21), (1446, 9, 20)),
        ((2025, 3, 28), (1446, 9, 27)),
        ((2025, 4, 1), (1446, 10, 1)),
        ((2025, 7, 7), (1447, 1, 10)),
    ],
)
def test_known_dates(greg, hijri):
    assert gregorian_to_hijri(*greg) == hijri


def test_astronomical_jd_matches_jdn_after_reform():
    d = date(1600, 1, 1)
    for i in range(0, 220000, 97):
        x = d + timedelta(days=i)
        assert astronomical_jd(x.year, x.month, x.day) == gregorian_to_jdn(x.year, x.month, x.day)


def test_julian_calendar_before_reform():
    # 1582-10-04 (Julian) is followed by 1582-10-15 (Gregorian)
    assert astronomical_jd(1582, 10, 15) - astronomical_jd(1582, 10, 4) == 1


def test_calibration_offset_is_configuration():
    arithmetic = HijriParams.like("arithmetic")
    assert arithmetic.calibration_offset == 0
    assert gregorian_to_hijri(2026, 1, 21, params=arithmetic) == (1447, 8, 3)
    assert gregorian_to_hijri(2026, 1, 21, params=DEFAULT_HIJRI.tweak(calibration_offset=-1)) == (1447, 8, 2)
    assert HijriParams.like("iran") is DEFAULT_HIJRI


def test_unknown_calibration():
    with pytest.raises(KeyError):
        HijriParams.like("nope")


def test_calibration_offset_must_be_int():
    with pytest.raises(ValueError):
        HijriParams(calibration_offset=1.5)


def test_month_clamp_fires_on_last_day_of_long_year():
    """Day 355 of a 355-day year computes as month 13 and is folded into 30 Dhu al-Hijjah."""
    jd = calibrated_jd(2018, 9, 12)
    assert hijri_from_jd(jd, clamp=False)[1] == 13
    assert gregorian_to_hijri(2018, 9, 11) == (1439, 12, 29)
    assert gregorian_to_hijri(2018, 9, 12) == (1439, 12, 30)
    assert gregorian_to_hijri(2018, 9, 13) == (1440, 1, 1)


def test_month_zero_never_computed():
    d = date(1900, 1, 1)
    for i in range(0, 80000):
        x = d + timedelta(days=i)
        _, raw_month, raw_day = hijri_from_jd(calibrated_jd(x.year, x.month, x.day), clamp=False)
        assert 1 <= raw_month <= 13
        if raw_month == 13:
            assert raw_day == 1


def test_output_is_structurally_valid():
    d = date(1950, 1, 1)
    for i in range(0, 40000, 3):
        x = d + timedelta(days=i)
        _, im, id_ = gregorian_to_hijri(x.year, x.month, x.day)
        assert 1 <= im <= 12
        assert 1 <= id_ <= 30


def test_no_inverse_conversion():
    with pytest.raises(UnsupportedConversionError):
        hijri_to_gregorian(1447, 8, 1)
    with pytest.raises(NotImplementedError):
        caljalali.hijri_to_gregorian(1447, 8, 1)
