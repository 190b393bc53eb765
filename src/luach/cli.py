from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from dataclasses import replace

import luach
from luach.config import Config
from luach.core.errors import LuachError

logger = logging.getLogger(__name__)

VERSION = luach.__version__
BANNER = f"Luach Hebrew Calendar, version {VERSION}"

_YEAR_RE = re.compile(r"^-?\d+$")


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


def _int_or_raw(s: str):
    return int(s) if _YEAR_RE.match(s) else s


def cmd_month(argv: list[str]) -> int:
    from luach.diagnostics.pretty_month import render_month

    p = argparse.ArgumentParser(prog="luach month", description="Print the calendar of a Hebrew month")
    p.add_argument("year", help="year from Creation (1..6000)")
    p.add_argument("month", help="month number (Tishrei = 1, Adar II = 13) or name")
    p.add_argument("--no-header", action="store_true", help="omit the month title and weekday header")
    p.add_argument("--no-molad", action="store_true", help="omit the molad line")
    args = p.parse_args(argv)

    m = luach.month_info(_int_or_raw(args.year), _int_or_raw(args.month))

    print(BANNER)
    print(f"Calendar for {m.name}, {m.year.year}")
    if not args.no_molad:
        print(m.molad.describe())
    print(render_month(m, header=not args.no_header))
    return 0


def cmd_year(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="luach year", description="Summarize a Hebrew year")
    p.add_argument("year", help="year from Creation (1..6000)")
    args = p.parse_args(argv)

    y = luach.year_info(_int_or_raw(args.year))
    print(f"Year {y.year}{' (leap)' if y.is_leap else ''}")
    print(f"  Molad Tishrei : {y.molad.normalize_days()}")
    print(f"  Rosh Hashana  : {y.rosh_hashana_name}")
    print(f"  Year type     : {y.year_type.name} ({y.length} days)")
    print()
    for m in luach.year_months(y.year):
        print(f"  {m.name:<12} {m.rosh_chodesh_name:<9} {m.length}  {m.molad.describe()}")
    return 0


def _load_config(args: argparse.Namespace) -> Config:
    config = Config.from_env()
    overrides = {}
    if args.current_year is not None:
        overrides["current_year"] = args.current_year
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return replace(config, **overrides) if overrides else config


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    g = argparse.ArgumentParser(add_help=False)
    g.add_argument("--current-year", type=int, default=None,
                   help="year used when the requested one is out of range (default: $LUACH_CURRENT_YEAR or 5781)")
    g.add_argument("--log-level", default=None, help="logging level (default: $LUACH_LOG_LEVEL or WARNING)")
    gargs, argv = g.parse_known_args(argv)

    try:
        config = _load_config(gargs)
    except ValueError as e:
        print(f"luach: {e}", file=sys.stderr)
        return 2
    config.setup_logging()
    luach.set_config(config)

    try:
        # Backward compatibility: `luach YEAR MONTH`
        if argv and _YEAR_RE.match(argv[0]):
            return cmd_month(argv)

        p = argparse.ArgumentParser(prog="luach", description="Hebrew calendar toolkit CLI.", parents=[g])
        p.add_argument("--version", action="version", version=BANNER)
        sub = p.add_subparsers(dest="cmd", required=True)

        sub.add_parser("month", help="Print the calendar of a month")
        sub.add_parser("year", help="Summarize a year")
        sub.add_parser("new-years", help="Print Rosh Hashana table (diagnostics)")
        sub.add_parser("pretty-month", help="Print a bare month grid (diagnostics)")

        args, rest = p.parse_known_args(argv)

        if args.cmd == "month":
            return cmd_month(rest)

        if args.cmd == "year":
            return cmd_year(rest)

        if args.cmd == "new-years":
            return _run_module_main("luach.diagnostics.new_years_table", rest)

        if args.cmd == "pretty-month":
            return _run_module_main("luach.diagnostics.pretty_month", rest)
    except LuachError as e:
        logger.debug("command failed", exc_info=True)
        print(f"luach: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
