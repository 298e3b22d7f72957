"""caljalali public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard day attributes on import
from .attributes import standard as _standard_attrs  # noqa: F401

from .api import (
    day_info,
    days_in_month,
    day_of_week_jalali,
    format_jalali,
    date_to_jalali,
    jalali_to_date,
    today_jalali,
    prev_month,
    next_month,
    clamp_day,
    month_grid,
    holidays_in_month,
)
from .core.errors import CaljalaliError, InvalidDateError, UnsupportedConversionError
from .core.time import gregorian_to_jdn, jdn_to_gregorian
from .core.types import DayInfo, HijriDate, JalaliDate
from .engines.hijri import HijriParams, gregorian_to_hijri, hijri_to_gregorian, jalali_to_hijri
from .engines.jalali import gregorian_to_jalali, jalali_to_gregorian, is_leap_jalali
from .holidays import holiday_name, is_holiday

__all__ = [
    "day_info",
    "days_in_month",
    "day_of_week_jalali",
    "format_jalali",
    "date_to_jalali",
    "jalali_to_date",
    "today_jalali",
    "prev_month",
    "next_month",
    "clamp_day",
    "month_grid",
    "holidays_in_month",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "is_leap_jalali",
    "gregorian_to_hijri",
    "jalali_to_hijri",
    "hijri_to_gregorian",
    "HijriParams",
    "is_holiday",
    "holiday_name",
    "JalaliDate",
    "HijriDate",
    "DayInfo",
    "CaljalaliError",
    "InvalidDateError",
    "UnsupportedConversionError",
]
