#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import caljalali


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljalali[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljalali[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Gregorian year, day-of-year of 1 Farvardin, and whether Esfand before it had 30 days."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    doy = np.empty_like(years, dtype=float)
    after_leap = np.zeros_like(years, dtype=bool)

    for i, jy in enumerate(years):
        d = caljalali.jalali_to_date(caljalali.JalaliDate(int(jy), 1, 1))
        prev = caljalali.jalali_to_date(caljalali.JalaliDate(int(jy) - 1, 1, 1))
        doy[i] = float(day_of_year(d))
        after_leap[i] = (d - prev).days == 366
    return years + 621, doy, after_leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Nowruz (1 Farvardin) Gregorian day-of-year.")
    p.add_argument("--start-year", type=int, default=1300, help="First Jalali year")
    p.add_argument("--end-year", type=int, default=1500, help="Last Jalali year")
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    x, y, after_leap = build_series(np, args.start_year, args.end_year)
    ax.scatter(x[~after_leap], y[~after_leap], s=14, marker="o", c="tab:blue", alpha=0.5, label="after 29 Esfand")
    ax.scatter(
        x[after_leap], y[after_leap],
        s=22, marker="o", facecolors="none", edgecolors="tab:red", linewidths=1.0,
        label="after 30 Esfand",
    )

    ax.set_xlabel("Gregorian year (approx.)")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    ax.set_title("Nowruz across Jalali years")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
