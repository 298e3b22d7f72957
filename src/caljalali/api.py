from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple, Union

from .attributes.registry import compute_attributes
from .core.errors import InvalidDateError
from .core.time import gregorian_weekday, to_jdn
from .core.types import DayInfo, HijriDate, JalaliDate
from .engines.hijri import HijriParams, gregorian_to_hijri
from .engines.jalali import (
    gregorian_to_jalali,
    jalali_days_in_month,
    jalali_to_gregorian,
)
from .holidays import holiday_name, is_holiday
from .tables import DEFAULT_LOCALE, month_name

# Gregorian weekday (0=Sun) -> Jalali weekday (0=Sat)
_WEEKDAY_REMAP = (1, 2, 3, 4, 5, 6, 0)

DateLike = Union[JalaliDate, date, str]

# ============================================================
# Month / weekday helpers
# ============================================================

def days_in_month(jy: int, jm: int) -> int:
    """31 for months 1-6, 30 for 7-11, 29/30 for Esfand (approximate leap rule)."""
    return jalali_days_in_month(jy, jm)

def day_of_week_jalali(jy: int, jm: int, jd: int) -> int:
    """Returns 0 for Saturday, 1 for Sunday, ..., 6 for Friday."""
    gy, gm, gd = jalali_to_gregorian(jy, jm, jd)
    return _WEEKDAY_REMAP[gregorian_weekday(gy, gm, gd)]

def prev_month(jy: int, jm: int) -> Tuple[int, int]:
    if jm == 1:
        return jy - 1, 12
    return jy, jm - 1

def next_month(jy: int, jm: int) -> Tuple[int, int]:
    if jm == 12:
        return jy + 1, 1
    return jy, jm + 1

def clamp_day(jy: int, jm: int, jd: int) -> int:
    """Clamp a picked day into the month, e.g. 31 Mehr -> 30 Mehr."""
    n = jalali_days_in_month(jy, jm)
    return max(1, min(jd, n))

def month_grid(jy: int, jm: int) -> List[List[Optional[int]]]:
    """
    Weeks of a Jalali month, Saturday first. Cells before day 1 and after
    the last day are None.
    """
    n = jalali_days_in_month(jy, jm)
    cells: List[Optional[int]] = [None] * day_of_week_jalali(jy, jm, 1)
    cells.extend(range(1, n + 1))
    while len(cells) % 7:
        cells.append(None)
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]

def holidays_in_month(
    jy: int,
    jm: int,
    *,
    locale: str = DEFAULT_LOCALE,
    params: Optional[HijriParams] = None,
) -> List[Tuple[int, str]]:
    """All days off in a Jalali month (Fridays included) with their display names."""
    out = []
    for jd in range(1, jalali_days_in_month(jy, jm) + 1):
        wd = day_of_week_jalali(jy, jm, jd)
        if is_holiday(jy, jm, jd, wd, params=params):
            out.append((jd, holiday_name(jy, jm, jd, wd, locale=locale, params=params)))
    return out

# ============================================================
# Date objects and formatting
# ============================================================

def date_to_jalali(d: date) -> JalaliDate:
    return JalaliDate(*gregorian_to_jalali(d.year, d.month, d.day))

def jalali_to_date(j: JalaliDate) -> date:
    return date(*jalali_to_gregorian(j.year, j.month, j.day))

def today_jalali(today: Optional[date] = None) -> JalaliDate:
    """Jalali date of the local wall-clock day (or of ``today`` if given)."""
    return date_to_jalali(today or date.today())

def _parse_iso(s: str) -> date:
    text = s.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidDateError(f"Not an ISO-8601 date: {s!r}") from e

def format_jalali(value: DateLike, *, locale: str = DEFAULT_LOCALE) -> str:
    """Render as '{day} {monthName} {year}', e.g. '1 Farvardin 1404'."""
    if isinstance(value, JalaliDate):
        j = value
    elif isinstance(value, str):
        j = date_to_jalali(_parse_iso(value))
    elif isinstance(value, datetime):
        j = date_to_jalali(value.date())
    elif isinstance(value, date):
        j = date_to_jalali(value)
    else:
        raise TypeError(f"Cannot format {type(value).__name__} as a Jalali date")
    return f"{j.day} {month_name(j.month, locale)} {j.year}"

# ============================================================
# Day-level facade
# ============================================================

def day_info(
    d: date,
    *,
    locale: str = DEFAULT_LOCALE,
    params: Optional[HijriParams] = None,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    j = date_to_jalali(d)
    h = HijriDate(*gregorian_to_hijri(d.year, d.month, d.day, params=params))
    wd = day_of_week_jalali(j.year, j.month, j.day)

    info = DayInfo(
        civil_date=d,
        jalali=j,
        hijri=h,
        weekday=wd,
        is_holiday=is_holiday(j.year, j.month, j.day, wd, params=params),
        holiday_name=holiday_name(j.year, j.month, j.day, wd, locale=locale, params=params),
        debug={"jdn": to_jdn(d), "locale": locale, "params": params} if debug else None,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes, locale=locale))
    return info
