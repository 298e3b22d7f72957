#!/usr/bin/env python3
"""
Compare the two Jalali leap rules year by year:

- approx: ((y + 38) * 31) % 128 <= 30   (month lengths)
- cycle : 33-year cycle of the converters (what the converters produce)

Years where they disagree are where days_in_month(y, 12) and the converters
give different Esfand lengths.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljalali[diagnostics]"') from e


def leap_masks(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=np.int64)
    approx = ((years + 38) * 31) % 128 <= 30
    r = (years + 1595) % 33
    cycle = (r % 4 == 0) & (r < 32)
    return years, approx, cycle


def disagreements(start_year: int, end_year: int) -> List[Tuple[int, bool, bool]]:
    np = _need_numpy()
    years, approx, cycle = leap_masks(np, start_year, end_year)
    idx = np.nonzero(approx != cycle)[0]
    return [(int(years[i]), bool(approx[i]), bool(cycle[i])) for i in idx]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Jalali leap-rule disagreement table.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    years, approx, cycle = leap_masks(np, args.start_year, args.end_year)
    rows = disagreements(args.start_year, args.end_year)

    print(f"Jalali years {args.start_year}..{args.end_year}: {len(years)}")
    print(f"  leap (approx): {int(approx.sum())}")
    print(f"  leap (cycle) : {int(cycle.sum())}")
    print(f"  disagree     : {len(rows)}")
    print()
    print("year   approx  cycle")
    for y, a, c in rows:
        print(f"{y:5d}  {str(a):6s}  {str(c):6s}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
