"""
Lenient boundary over the engines.

The engines reject bad input with InvalidInputError; the helpers here fall back
instead (unusable year -> configured current year, unusable month -> Tishrei)
and log a warning, which is what the command line wants.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from .config import Config
from .core.errors import InvalidInputError
from .core.time import MoladTime
from .core.types import HebrewMonth, HebrewYear
from .engines import month as _month
from .engines import year as _year

logger = logging.getLogger(__name__)

_config: Optional[Config] = None


def set_config(config: Config) -> None:
    global _config
    _config = config


def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config


def current_year() -> int:
    return get_config().current_year


# ============================================================
# Selector resolution
# ============================================================

def resolve_year(year: Any) -> int:
    try:
        return _year.check_year(year)
    except InvalidInputError as e:
        fallback = current_year()
        logger.warning("%s; using current year %d", e, fallback)
        return fallback


def resolve_month(year: HebrewYear, month: Any) -> int:
    try:
        if isinstance(month, str):
            month = _month.parse_month(month)
        return _month.check_month(month, year.is_leap)
    except InvalidInputError as e:
        logger.warning("%s; using Tishrei of %d", e, year.year)
        return _month.TISHREI


# ============================================================
# Year / month lookups
# ============================================================

def _cached(fn, *args):
    """Call an lru_cache-wrapped engine function, logging when it had to compute."""
    misses = fn.cache_info().misses
    out = fn(*args)
    if fn.cache_info().misses > misses:
        logger.debug("cache miss: %s%r", fn.__name__, args)
    return out


def year_info(year: Any) -> HebrewYear:
    return _cached(_year.hebrew_year, resolve_year(year))


def month_info(year: Any, month: Any, *, debug: bool = False) -> HebrewMonth:
    y = year_info(year)
    m = resolve_month(y, month)
    info = _cached(_month.hebrew_month, y.year, m)
    if debug:
        info = replace(info, debug=_month_debug(y, info))
    return info


def year_months(year: Any) -> List[HebrewMonth]:
    """All months of a year in chronological order."""
    y = year_info(year)
    leap = y.is_leap
    return [
        _cached(_month.hebrew_month, y.year, _month.to_normalized(seq, leap))
        for seq in range(1, _month.months_in_year(leap) + 1)
    ]


def molad(year: Any, month: Any = _month.TISHREI) -> MoladTime:
    return month_info(year, month).molad


def new_year_day(year: Any) -> int:
    """Weekday of Rosh Hashana (0 = Shabbos)."""
    return year_info(year).rosh_hashana


def year_length(year: Any) -> int:
    return year_info(year).length


def year_summary(year: Any) -> Dict[str, Any]:
    y = year_info(year)
    return {
        "year": y.year,
        "is_leap": y.is_leap,
        "molad": y.molad.normalize_days().as_tuple(),
        "rosh_hashana": y.rosh_hashana,
        "year_type": y.year_type.name,
        "length": y.length,
        "months": [
            {
                "month": m.month,
                "name": m.name,
                "rosh_chodesh": m.rosh_chodesh,
                "length": m.length,
                "molad": m.molad.as_tuple(),
            }
            for m in year_months(y.year)
        ],
    }


def clear_cache() -> None:
    _year.hebrew_year.cache_clear()
    _month.hebrew_month.cache_clear()


def _month_debug(year: HebrewYear, info: HebrewMonth) -> Dict[str, Any]:
    return {
        "tishrei_molad": year.molad.as_tuple(),
        "tishrei_weekday_molad": year.molad.normalize_days().as_tuple(),
        "nosar_steps": info.sequence - 1,
        "rosh_hashana": year.rosh_hashana,
        "year_type": year.year_type.name,
        "is_leap": year.is_leap,
    }
