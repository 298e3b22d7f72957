from __future__ import annotations

import argparse

import caljalali
from caljalali.engines.hijri import HijriParams
from caljalali.tables import tables


def dow_header(locale: str) -> str:
    return " ".join(name[:6].ljust(6) for name in tables(locale).weekdays)


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]], locale: str) -> None:
    header = dow_header(locale)
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def jalali_month_calendar(jy: int, jm: int, *, locale: str = "en", calibration: str = "iran") -> None:
    params = HijriParams.like(calibration)
    off = dict(caljalali.holidays_in_month(jy, jm, locale=locale, params=params))

    weeks: list[list[tuple[str, str]]] = []
    for row in caljalali.month_grid(jy, jm):
        wk = []
        for jd in row:
            if jd is None:
                wk.append(cell("", ""))
                continue
            _, im, id_ = caljalali.jalali_to_hijri(jy, jm, jd, params=params)
            mark = "*" if jd in off else ""
            wk.append(cell(f"{jd:2d}{mark}", f"{im:02d}-{id_:02d}"))
        weeks.append(wk)

    first = caljalali.jalali_to_date(caljalali.JalaliDate(jy, jm, 1))
    title = f"{caljalali.format_jalali(caljalali.JalaliDate(jy, jm, 1), locale=locale)}   (from {first})"
    print_grid(title, weeks, locale)

    for jd, name in off.items():
        print(f"  {jd:2d}  {name}")
    print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Jalali month calendar with Hijri labels and days off (* marked)."
    )
    p.add_argument("jy", type=int, nargs="?", default=1404, help="Jalali year")
    p.add_argument("jm", type=int, nargs="?", default=1, help="Jalali month 1..12")
    p.add_argument("--locale", default="en", help="en|fa")
    p.add_argument("--calibration", default="iran", help="Hijri calibration name (iran|arithmetic)")
    args = p.parse_args(argv)

    jalali_month_calendar(args.jy, args.jm, locale=args.locale, calibration=args.calibration)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
