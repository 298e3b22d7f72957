"""
caljalali.engines.jalali
------------------------
Direct epoch arithmetic between the Gregorian and Jalali (Persian solar)
calendars. Elapsed days are partitioned into 33-year, 4-year and 1-year
cycles; the Jalali year splits at day 186 into six 31-day and six 30-day
months.

Two leap rules live here and they are NOT the same:

- the ``((jy + 38) * 31) % 128 <= 30`` approximation (``is_leap_jalali``),
  which gives month lengths everywhere in the calendar utilities;
- the 33-year cycle implied by the conversion arithmetic
  (``is_cycle_leap_jalali``), which decides what the converters produce.

They disagree in some years (e.g. 1403/1404). A day is accepted when either
rule has it. 30 Esfand of a year that is leap only by the approximation
(1404, 1437, 1470, ...) converts to the same Gregorian day as 1 Farvardin
of the next year, so it does not round-trip.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidDateError
from ..core.time import is_gregorian_leap, validate_gregorian

YMD = Tuple[int, int, int]

# Days before Gregorian month m (non-leap year), index m-1
_G_DAYS_BEFORE = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Day counts since the arithmetic epoch
_G_EPOCH = 355666
_J_EPOCH = 355668
_J_YEAR_SHIFT = 1595

_DAYS_33Y = 12053     # 33 * 365 + 8
_DAYS_4Y = 1461
_DAYS_400Y = 146097
_DAYS_100Y = 36524

# First day-of-year of Mehr (month 7): 6 * 31
_MEHR_OFFSET = 186


# ---------------------------------------------------------
# Leap rules and month lengths
# ---------------------------------------------------------

def is_leap_jalali(jy: int) -> bool:
    """Approximate Jalali leap test used for Esfand length."""
    return ((jy + 38) * 31) % 128 <= 30


def is_cycle_leap_jalali(jy: int) -> bool:
    """Leap test implied by the converters' 33-year cycle arithmetic."""
    r = (jy + _J_YEAR_SHIFT) % 33
    return r % 4 == 0 and r < 32


def jalali_days_in_month(jy: int, jm: int) -> int:
    if not (1 <= jm <= 12):
        raise InvalidDateError(f"Jalali month must be in 1..12, got {jm}")
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_leap_jalali(jy) else 29


def jalali_month_length(jy: int, jm: int) -> int:
    """Month length as the converters see it (33-year cycle for Esfand)."""
    if jm == 12:
        return 30 if is_cycle_leap_jalali(jy) else 29
    return jalali_days_in_month(jy, jm)


def validate_jalali(jy: int, jm: int, jd: int) -> None:
    n = max(jalali_days_in_month(jy, jm), jalali_month_length(jy, jm))
    if not (1 <= jd <= n):
        raise InvalidDateError(f"Jalali day must be in 1..{n} for {jy}/{jm:02d}, got {jd}")


# ---------------------------------------------------------
# Conversions
# ---------------------------------------------------------

def _gregorian_to_jalali(gy: int, gm: int, gd: int) -> YMD:
    gy2 = gy + 1 if gm > 2 else gy
    days = (
        _G_EPOCH
        + 365 * gy
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        + gd
        + _G_DAYS_BEFORE[gm - 1]
    )
    jy = -_J_YEAR_SHIFT + 33 * (days // _DAYS_33Y)
    days %= _DAYS_33Y
    jy += 4 * (days // _DAYS_4Y)
    days %= _DAYS_4Y
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < _MEHR_OFFSET:
        return jy, 1 + days // 31, 1 + days % 31
    return jy, 7 + (days - _MEHR_OFFSET) // 30, 1 + (days - _MEHR_OFFSET) % 30


def _jalali_to_gregorian(jy: int, jm: int, jd: int) -> YMD:
    jy += _J_YEAR_SHIFT
    month_offset = (jm - 1) * 31 if jm < 7 else (jm - 7) * 30 + _MEHR_OFFSET
    days = -_J_EPOCH + 365 * jy + (jy // 33) * 8 + (jy % 33 + 3) // 4 + jd + month_offset

    gy = 400 * (days // _DAYS_400Y)
    days %= _DAYS_400Y
    if days > _DAYS_100Y:
        days -= 1
        gy += 100 * (days // _DAYS_100Y)
        days %= _DAYS_100Y
        if days >= 365:
            days += 1
    gy += 4 * (days // _DAYS_4Y)
    days %= _DAYS_4Y
    if days > 365:
        gy += (days - 1) // 365
        days = (days - 1) % 365

    gd = days + 1
    month_days = (31, 29 if is_gregorian_leap(gy) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    gm = 1
    for n in month_days:
        if gd <= n:
            break
        gd -= n
        gm += 1
    return gy, gm, gd


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> YMD:
    validate_gregorian(gy, gm, gd)
    return _gregorian_to_jalali(gy, gm, gd)


def jalali_to_gregorian(jy: int, jm: int, jd: int) -> YMD:
    validate_jalali(jy, jm, jd)
    return _jalali_to_gregorian(jy, jm, jd)
