#!/usr/bin/env python3
"""
Drift of each year's first day against the calendar's mean year.

For year Y the drift is (days from the epoch to Y-01-01) - (Y - 1) * mean
year length, as an exact Fraction. A Gregorian calendar oscillates inside a
band of about two days over its 400-year cycle; a calendar without leap
years has zero drift.
"""
from __future__ import annotations

import argparse
from fractions import Fraction
from typing import List, Tuple

import calarith
from calarith.rules.interfaces import CalendarRuleProtocol


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calarith[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calarith[diagnostics]"') from e


def year_start_drift(rule: CalendarRuleProtocol, start: int, stop: int) -> List[Tuple[int, Fraction]]:
    """(year, drift in days) for start <= year < stop."""
    out = []
    for year in range(start, stop):
        days = rule.to_scalar_strict(year, 1, 1) // rule.units_per_day
        out.append((year, days - (year - 1) * rule.mean_days_in_year))
    return out


def plot_drift(rows: List[Tuple[int, Fraction]], title: str, out: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    years = np.array([y for y, _ in rows], dtype=np.int64)
    drift = np.array([float(d) for _, d in rows], dtype=float)

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.step(years, drift, where="post", lw=1.0, color="0.15")
    ax.axhline(0.0, lw=0.8, color="0.6")
    ax.set_xlabel("year (astronomical)")
    ax.set_ylabel("drift (days)")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out)
    plt.close(fig)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Year-start drift against the mean year.")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--from-year", type=int, default=1)
    p.add_argument("--to-year", type=int, default=801)
    p.add_argument("--plot", metavar="PNG", help="write a step plot instead of printing a table")
    args = p.parse_args(argv)

    if args.to_year <= args.from_year:
        raise SystemExit("--to-year must be > --from-year")

    rule = calarith.get_calendar(args.calendar)
    rows = year_start_drift(rule, args.from_year, args.to_year)

    if args.plot:
        plot_drift(rows, f"{rule.name}: year-start drift", args.plot)
        print(f"wrote {args.plot}")
        return 0

    lo = min(d for _, d in rows)
    hi = max(d for _, d in rows)
    for year, drift in rows:
        print(f"{year:>8} {rule.days_in_year(year):>5} {float(drift):>+9.4f}")
    print(f"range: {float(lo):+.4f} .. {float(hi):+.4f} days")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
