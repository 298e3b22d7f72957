"""
caljalali.holidays
------------------
Day-off classification for a Jalali date.

A day is off when it is a Friday, a fixed solar holiday, or a fixed lunar
holiday of its Hijri date. When several apply, the display name is chosen
solar first, then lunar, then the plain Friday label.
"""

from __future__ import annotations

from typing import Optional

from .engines.hijri import HijriParams, jalali_to_hijri
from .engines.jalali import validate_jalali
from .tables import DEFAULT_LOCALE, FRIDAY, lunar_holiday, solar_holiday, tables


def is_holiday(jy: int, jm: int, jd: int, weekday: int, *, params: Optional[HijriParams] = None) -> bool:
    """weekday: Jalali weekday index, 0=Sat..6=Fri."""
    validate_jalali(jy, jm, jd)
    if weekday == FRIDAY:
        return True
    if solar_holiday(jm, jd) is not None:
        return True
    _, im, id_ = jalali_to_hijri(jy, jm, jd, params=params)
    return lunar_holiday(im, id_) is not None


def holiday_name(
    jy: int,
    jm: int,
    jd: int,
    weekday: int,
    *,
    locale: str = DEFAULT_LOCALE,
    params: Optional[HijriParams] = None,
) -> Optional[str]:
    validate_jalali(jy, jm, jd)
    name = solar_holiday(jm, jd, locale)
    if name is not None:
        return name

    _, im, id_ = jalali_to_hijri(jy, jm, jd, params=params)
    name = lunar_holiday(im, id_, locale)
    if name is not None:
        return name

    if weekday == FRIDAY:
        return tables(locale).friday_label
    return None
