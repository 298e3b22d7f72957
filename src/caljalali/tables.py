"""
caljalali.tables
----------------
Static name and holiday tables. Built once at import and never mutated.

Holiday tables are exact (month, day) lookups keyed ``"{month}-{day}"``.
Moveable observances (elections, sighting-based dates) are not encoded.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

DEFAULT_LOCALE = "en"

# Jalali weekday index (0=Sat..6=Fri) of Friday
FRIDAY = 6


@dataclass(frozen=True)
class NameTables:
    jalali_months: Tuple[str, ...]    # index 0 = Farvardin
    hijri_months: Tuple[str, ...]     # index 0 = Muharram
    weekdays: Tuple[str, ...]         # index 0 = Saturday
    solar_holidays: Mapping[str, str]
    lunar_holidays: Mapping[str, str]
    friday_label: str

    def __post_init__(self) -> None:
        if len(self.jalali_months) != 12 or len(self.hijri_months) != 12:
            raise ValueError("month name tables must have 12 entries")
        if len(self.weekdays) != 7:
            raise ValueError("weekday table must have 7 entries")


def holiday_key(month: int, day: int) -> str:
    return f"{month}-{day}"


_EN = NameTables(
    jalali_months=(
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
    hijri_months=(
        "Muharram", "Safar", "Rabi' al-Awwal", "Rabi' al-Thani", "Jumada al-Awwal", "Jumada al-Thani",
        "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qa'dah", "Dhu al-Hijjah",
    ),
    weekdays=("Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday"),
    solar_holidays=MappingProxyType({
        "1-1": "Nowruz",
        "1-2": "Nowruz",
        "1-3": "Nowruz",
        "1-4": "Nowruz",
        "1-12": "Islamic Republic Day",
        "1-13": "Nature Day",
        "3-14": "Demise of Imam Khomeini",
        "3-15": "15 Khordad Uprising",
        "11-22": "Victory of the Islamic Revolution",
        "12-29": "Oil Nationalization Day",
    }),
    lunar_holidays=MappingProxyType({
        "1-9": "Tasua",
        "1-10": "Ashura",
        "2-20": "Arbaeen",
        "2-28": "Demise of the Prophet and Martyrdom of Imam Hasan",
        # Safar has 29 days in the tabular cycle, so this key never matches
        "2-30": "Martyrdom of Imam Reza",
        "8-15": "Mid-Sha'ban",
        "9-21": "Martyrdom of Imam Ali",
        "10-1": "Eid al-Fitr",
        "10-25": "Martyrdom of Imam Ja'far al-Sadiq",
        "12-10": "Eid al-Adha",
        "12-18": "Eid al-Ghadir",
    }),
    friday_label="Friday",
)

_FA = NameTables(
    jalali_months=(
        "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ),
    hijri_months=(
        "محرم", "صفر", "ربیع‌الاول", "ربیع‌الثانی", "جمادی‌الاول", "جمادی‌الثانی",
        "رجب", "شعبان", "رمضان", "شوال", "ذیقعده", "ذیحجه",
    ),
    weekdays=("شنبه", "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنج‌شنبه", "جمعه"),
    solar_holidays=MappingProxyType({
        "1-1": "عید نوروز",
        "1-2": "عید نوروز",
        "1-3": "عید نوروز",
        "1-4": "عید نوروز",
        "1-12": "روز جمهوری اسلامی",
        "1-13": "روز طبیعت",
        "3-14": "رحلت امام خمینی",
        "3-15": "قیام ۱۵ خرداد",
        "11-22": "پیروزی انقلاب اسلامی",
        "12-29": "روز ملی شدن صنعت نفت",
    }),
    lunar_holidays=MappingProxyType({
        "1-9": "تاسوعای حسینی",
        "1-10": "عاشورای حسینی",
        "2-20": "اربعین حسینی",
        "2-28": "رحلت پیامبر (ص) و شهادت امام حسن (ع)",
        "2-30": "شهادت امام رضا (ع)",
        "8-15": "نیمه شعبان (ولادت امام زمان)",
        "9-21": "شهادت حضرت علی (ع)",
        "10-1": "عید سعید فطر",
        "10-25": "شهادت امام جعفر صادق (ع)",
        "12-10": "عید سعید قربان",
        "12-18": "عید سعید غدیر خم",
    }),
    friday_label="جمعه",
)

_LOCALES: Mapping[str, NameTables] = MappingProxyType({"en": _EN, "fa": _FA})

JALALI_MONTH_NAMES = _EN.jalali_months
HIJRI_MONTH_NAMES = _EN.hijri_months
WEEKDAY_NAMES = _EN.weekdays
SOLAR_HOLIDAYS = _EN.solar_holidays
LUNAR_HOLIDAYS = _EN.lunar_holidays


def list_locales() -> Tuple[str, ...]:
    return tuple(sorted(_LOCALES))


def tables(locale: str = DEFAULT_LOCALE) -> NameTables:
    if locale not in _LOCALES:
        raise KeyError(f"Unknown locale '{locale}'. Available: {sorted(_LOCALES)}")
    return _LOCALES[locale]


def month_name(jm: int, locale: str = DEFAULT_LOCALE) -> str:
    if not (1 <= jm <= 12):
        raise ValueError(f"month must be in 1..12, got {jm}")
    return tables(locale).jalali_months[jm - 1]


def hijri_month_name(im: int, locale: str = DEFAULT_LOCALE) -> str:
    if not (1 <= im <= 12):
        raise ValueError(f"month must be in 1..12, got {im}")
    return tables(locale).hijri_months[im - 1]


def weekday_name(weekday: int, locale: str = DEFAULT_LOCALE) -> str:
    if not (0 <= weekday <= 6):
        raise ValueError(f"weekday must be in 0..6, got {weekday}")
    return tables(locale).weekdays[weekday]


def solar_holiday(jm: int, jd: int, locale: str = DEFAULT_LOCALE) -> Optional[str]:
    return tables(locale).solar_holidays.get(holiday_key(jm, jd))


def lunar_holiday(im: int, id_: int, locale: str = DEFAULT_LOCALE) -> Optional[str]:
    return tables(locale).lunar_holidays.get(holiday_key(im, id_))
