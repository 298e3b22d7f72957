from __future__ import annotations
from datetime import date
from typing import Tuple

from .errors import InvalidDateError

YMD = Tuple[int, int, int]

_GREG_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(gy: int) -> bool:
    return (gy % 4 == 0 and gy % 100 != 0) or gy % 400 == 0


def gregorian_days_in_month(gy: int, gm: int) -> int:
    if gm == 2 and is_gregorian_leap(gy):
        return 29
    return _GREG_MONTH_DAYS[gm - 1]


def validate_gregorian(gy: int, gm: int, gd: int) -> None:
    if not (1 <= gm <= 12):
        raise InvalidDateError(f"Gregorian month must be in 1..12, got {gm}")
    n = gregorian_days_in_month(gy, gm)
    if not (1 <= gd <= n):
        raise InvalidDateError(f"Gregorian day must be in 1..{n} for {gy}-{gm:02d}, got {gd}")


def gregorian_to_jdn(gy: int, gm: int, gd: int) -> int:
    """Convert a proleptic Gregorian date to its Julian Day Number (JDN)."""
    validate_gregorian(gy, gm, gd)
    a = (14 - gm) // 12
    y2 = gy + 4800 - a
    m2 = gm + 12 * a - 3
    return gd + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> YMD:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def gregorian_weekday(gy: int, gm: int, gd: int) -> int:
    # Convention: 0=Sun..6=Sat (JDN 0 was a Monday).
    return (gregorian_to_jdn(gy, gm, gd) + 1) % 7


def to_jdn(d: date) -> int:
    return gregorian_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return date(*jdn_to_gregorian(jdn))
