from __future__ import annotations
from typing import Any, Dict

from ..engines.jalali import is_cycle_leap_jalali, is_leap_jalali
from ..tables import hijri_month_name, month_name, weekday_name
from .registry import register_attribute, jdn

def julian_day(info, locale) -> Dict[str, Any]:
    return {"jdn": jdn(info)}

def names(info, locale) -> Dict[str, Any]:
    return {
        "weekday_name": weekday_name(info.weekday, locale),
        "jalali_month_name": month_name(info.jalali.month, locale),
        "hijri_month_name": hijri_month_name(info.hijri.month, locale),
    }

def leap_year(info, locale) -> Dict[str, Any]:
    # The two rules disagree in some years; report both.
    y = info.jalali.year
    return {
        "leap_approx": is_leap_jalali(y),
        "leap_cycle": is_cycle_leap_jalali(y),
    }

register_attribute("jdn", julian_day)
register_attribute("names", names)
register_attribute("leap_year", leap_year)
