from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..engines.jalali import validate_jalali

@dataclass(frozen=True)
class JalaliDate:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        validate_jalali(self.year, self.month, self.day)

@dataclass(frozen=True)
class HijriDate:
    """Derived only: there is no Hijri -> Gregorian path."""
    year: int
    month: int
    day: int

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    jalali: JalaliDate
    hijri: HijriDate
    weekday: int  # 0=Sat..6=Fri
    is_holiday: bool
    holiday_name: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
