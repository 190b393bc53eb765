from __future__ import annotations

import argparse
from typing import List

import luach
from luach.core.time import DAYS
from luach.core.types import HebrewMonth

CELL = 3


def dow_header() -> str:
    return "  S  M  T  W  T  F  S"


def column(weekday: int) -> int:
    """Grid column of a weekday: Sunday (1) is first, Shabbos (0) last."""
    return (weekday - 1) % DAYS


def month_grid(m: HebrewMonth) -> List[str]:
    weeks: List[str] = []
    row = " " * CELL * column(m.rosh_chodesh)
    col = column(m.rosh_chodesh)
    for day in range(1, m.length + 1):
        row += f"{day:{CELL}d}"
        col += 1
        if col == DAYS:
            weeks.append(row)
            row, col = "", 0
    if row:
        weeks.append(row)
    return weeks


def render_month(m: HebrewMonth, *, header: bool = True) -> str:
    lines: List[str] = []
    if header:
        lines.append(f"    {m.name} {m.year.year}")
        lines.append(dow_header())
    lines.extend(month_grid(m))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the calendar grid of a Hebrew month.")
    p.add_argument("year", type=int)
    p.add_argument("month", help="month number or name (e.g. 7, nissan, adar_ii)")
    p.add_argument("--no-header", action="store_true")
    p.add_argument("--molad", action="store_true", help="also print the month's molad")
    args = p.parse_args(argv)

    m = luach.month_info(args.year, args.month)
    if args.molad:
        print(m.molad.describe())
    print(render_month(m, header=not args.no_header))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
