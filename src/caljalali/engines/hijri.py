"""
caljalali.engines.hijri
-----------------------
One-way Gregorian -> Hijri (lunar) conversion.

The civil date is turned into a Julian Day with the Meeus formula, shifted by
an empirical calibration offset, then inverted through the arithmetic Hijri
epoch using a 30-year cycle of 10631 days and 29.5-day months.

The calibration is a point fit against one observed reference date. It is
configuration data (see ``engines.specs``), not an astronomical constant, and
may need re-tuning if the result drifts from the observed calendar.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..core.errors import UnsupportedConversionError
from ..core.time import validate_gregorian
from .jalali import jalali_to_gregorian

YMD = Tuple[int, int, int]

HIJRI_EPOCH_JD = 1948084
DAYS_PER_30Y = 10631


@dataclass(frozen=True)
class HijriParams:
    """
    calibration_offset: days added to the computed JD before inversion.
    reference: human note of the alignment the offset was tuned to.
    """
    calibration_offset: int = -2
    epoch_jd: int = HIJRI_EPOCH_JD
    month_shift: float = 8.01 / 60.0
    reference: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.calibration_offset, bool) or not isinstance(self.calibration_offset, int):
            raise ValueError("calibration_offset must be an integer number of days")

    @staticmethod
    def like(name: str) -> "HijriParams":
        from .specs import HIJRI_SPECS
        if name not in HIJRI_SPECS:
            raise KeyError(f"Unknown Hijri calibration '{name}'. Available: {sorted(HIJRI_SPECS)}")
        return HIJRI_SPECS[name]

    def tweak(self, **kwargs) -> "HijriParams":
        return replace(self, **kwargs)


def astronomical_jd(gy: int, gm: int, gd: int) -> int:
    """
    Meeus Julian Day (at noon, i.e. the JDN) of a civil date.
    Dates before 1582-10-15 are read as Julian calendar dates.
    """
    y, m = gy, gm
    if m < 3:
        y -= 1
        m += 12

    a = math.floor(y / 100)
    b = 2 - a + math.floor(a / 4)
    if y < 1583:
        b = 0
    if y == 1582:
        if m > 10:
            b = -10
        if m == 10:
            b = 0
            if gd > 4:
                b = -10

    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + gd + b - 1524


def _year_and_day(jd: int, p: HijriParams) -> Tuple[int, int]:
    """Hijri year and 1-based day-of-year of an (already calibrated) JD."""
    iyear = DAYS_PER_30Y / 30.0
    z = jd - p.epoch_jd
    cyc = math.floor(z / DAYS_PER_30Y)
    z -= DAYS_PER_30Y * cyc
    j = math.floor((z - p.month_shift) / iyear)
    z -= math.floor(j * iyear + p.month_shift)
    return 30 * cyc + j, z


def clamp_month(im: int) -> int:
    # 29.5-day months put day 355 of a 355-day year into "month 13"
    if im == 13:
        return 12
    if im == 0:
        return 1
    return im


def hijri_from_jd(jd: int, params: Optional[HijriParams] = None, *, clamp: bool = True) -> YMD:
    """
    Cycle inversion of an (already calibrated) JD.
    With clamp=False the raw month is returned, which can be 13.
    """
    p = params or DEFAULT_HIJRI
    iy, z = _year_and_day(jd, p)
    im = math.floor((z + 28.5001) / 29.5)
    if clamp:
        im = clamp_month(im)
    return iy, im, z - math.floor(29.5 * im - 29)


def calibrated_jd(gy: int, gm: int, gd: int, *, params: Optional[HijriParams] = None) -> int:
    validate_gregorian(gy, gm, gd)
    p = params or DEFAULT_HIJRI
    return astronomical_jd(gy, gm, gd) + p.calibration_offset


def gregorian_to_hijri(gy: int, gm: int, gd: int, *, params: Optional[HijriParams] = None) -> YMD:
    p = params or DEFAULT_HIJRI
    return hijri_from_jd(calibrated_jd(gy, gm, gd, params=p), p)


def jalali_to_hijri(jy: int, jm: int, jd: int, *, params: Optional[HijriParams] = None) -> YMD:
    gy, gm, gd = jalali_to_gregorian(jy, jm, jd)
    return gregorian_to_hijri(gy, gm, gd, params=params)


def hijri_to_gregorian(iy: int, im: int, id_: int) -> YMD:
    """Not provided: the calibration offset is a one-way correction."""
    raise UnsupportedConversionError(
        "Hijri -> Gregorian is not supported; the calibrated lunar conversion has no exact inverse"
    )


DEFAULT_HIJRI = HijriParams(reference="1 Bahman 1404 = 2026-01-21 = 1 Sha'ban 1447")
