from __future__ import annotations

import argparse
from typing import List

from luach.engines.year import hebrew_year
from luach.core.time import WEEKDAYS


def row(year: int) -> List[str]:
    y = hebrew_year(year)
    m = y.molad.normalize_days()
    return [
        str(y.year),
        "L" if y.is_leap else "",
        f"{m.days}'{m.hours:02d}'{m.chalakim:04d}",
        WEEKDAYS[y.rosh_hashana],
        y.year_type.name,
        str(y.length),
    ]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Rosh Hashana weekday, year type and length for a range of years."
    )
    p.add_argument("--from-year", type=int, default=5780)
    p.add_argument("--to-year", type=int, default=5800)
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Leap", "Molad", "Rosh Hashana", "Type", "Days"]
    colw = [5, 4, 11, 12, 6, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        print("  ".join(c.ljust(w) for c, w in zip(row(Y), colw)).rstrip())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
