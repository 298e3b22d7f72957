from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_day(info, locale: str) -> None:
    import caljalali
    from caljalali.tables import hijri_month_name, weekday_name

    j, h = info.jalali, info.hijri
    print(f"Gregorian : {info.civil_date}")
    print(f"Jalali    : {j.year}-{j.month:02d}-{j.day:02d}  ({caljalali.format_jalali(j, locale=locale)})")
    print(f"Hijri     : {h.year}-{h.month:02d}-{h.day:02d}  ({h.day} {hijri_month_name(h.month, locale)} {h.year})")
    print(f"Weekday   : {weekday_name(info.weekday, locale)} ({info.weekday})")
    print(f"Day off   : {'yes' if info.is_holiday else 'no'}" + (f"  [{info.holiday_name}]" if info.holiday_name else ""))
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k} = {v}")
    if info.debug:
        for k, v in info.debug.items():
            print(f"  debug.{k} = {v}")


def cmd_day(argv: list[str]) -> int:
    import caljalali
    from caljalali.engines.hijri import HijriParams

    p = argparse.ArgumentParser(prog="caljalali day", description="Gregorian -> Jalali / Hijri day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--locale", default="en")
    p.add_argument("--calibration", default="iran", help="Hijri calibration name")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        d = date.fromisoformat(args.date)
    except ValueError as e:
        raise SystemExit(f"Invalid date {args.date!r}: {e}")

    info = caljalali.day_info(
        d,
        locale=args.locale,
        params=HijriParams.like(args.calibration),
        attributes=tuple(args.attr),
        debug=args.debug,
    )
    _print_day(info, args.locale)
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import caljalali

    p = argparse.ArgumentParser(prog="caljalali to-gregorian", description="Jalali -> Gregorian")
    p.add_argument("jy", type=int)
    p.add_argument("jm", type=int)
    p.add_argument("jd", type=int)
    args = p.parse_args(argv)

    try:
        gy, gm, gd = caljalali.jalali_to_gregorian(args.jy, args.jm, args.jd)
    except caljalali.InvalidDateError as e:
        raise SystemExit(str(e))
    print(f"{gy:04d}-{gm:02d}-{gd:02d}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `caljalali YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="caljalali", description="Jalali / Hijri calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Jalali / Hijri day label")
    sub.add_parser("to-gregorian", help="Jalali -> Gregorian")
    sub.add_parser("month", help="Print a Jalali month calendar with days off")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-years", "round-trip", "hijri-clamp", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "month":
        return _run_module_main("caljalali.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-years": "caljalali.diagnostics.leap_years",
            "round-trip": "caljalali.diagnostics.round_trip",
            "hijri-clamp": "caljalali.diagnostics.hijri_clamp",
            "nowruz-scatter": "caljalali.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
