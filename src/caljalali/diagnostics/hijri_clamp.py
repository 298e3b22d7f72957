"""
List the days on which the Hijri month clamp fires (raw month 13 -> 12).

With 29.5-day months, day 355 of a 355-day tabular year lands in "month 13";
the clamp folds it back into Dhu al-Hijjah as its 30th day. Raw month 0
cannot occur because every year starts on day-of-year 1.
"""
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Optional, Tuple

from caljalali.core.types import HijriDate
from caljalali.engines.hijri import HijriParams, calibrated_jd, hijri_from_jd


def clamp_days(start: date, end: date, params: HijriParams) -> List[Tuple[date, HijriDate]]:
    out = []
    d = start
    while d <= end:
        jd = calibrated_jd(d.year, d.month, d.day, params=params)
        _, raw_month, _ = hijri_from_jd(jd, params, clamp=False)
        if raw_month in (0, 13):
            out.append((d, HijriDate(*hijri_from_jd(jd, params))))
        d += timedelta(days=1)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Dates where the Hijri month clamp fires.")
    p.add_argument("--start", default="2000-01-01", help="YYYY-MM-DD")
    p.add_argument("--end", default="2030-12-31", help="YYYY-MM-DD")
    p.add_argument("--calibration", default="iran", help="Hijri calibration name")
    args = p.parse_args(argv)

    start = date.fromisoformat(args.start)
    end = date.fromisoformat(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    rows = clamp_days(start, end, HijriParams.like(args.calibration))
    for d, h in rows:
        print(f"{d}  ->  {h.year}-{h.month:02d}-{h.day:02d}")
    print(f"\n{len(rows)} clamped days in {start} .. {end}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
