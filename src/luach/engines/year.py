"""
luach.engines.year
------------------
Year-level derivations: the leap pattern of the 19-year cycle, the molad of
Tishrei, the weekday of Rosh Hashana after the four postponements (dichuyim),
and the year type.

Rosh Hashana of year Y+1 is needed to classify year Y, so the weekday rule is
a plain function of (year, molad) rather than a method on a year record.
"""

from __future__ import annotations

from functools import lru_cache
from typing import FrozenSet

from ..core.errors import CalendarInvariantError, InvalidInputError
from ..core.time import BAHARAD, DAYS, LEAP_YEAR, MACHZOR, REGULAR_YEAR, MoladTime
from ..core.types import HebrewYear, YearType

MIN_YEAR = 1
MAX_YEAR = 6000
CYCLE_YEARS = 19

LEAP_POSITIONS: FrozenSet[int] = frozenset({0, 3, 6, 8, 11, 14, 17})

# Weekdays Rosh Hashana may not fall on: Sunday, Wednesday, Friday (Lo ADU Rosh)
_LO_ADU: FrozenSet[int] = frozenset({1, 4, 6})

# (first, next, is_leap) -> type; every other combination is INVALID
_YEAR_TYPES = {
    (2, 5, False): YearType.CHASER,
    (2, 0, True): YearType.CHASER,
    (2, 0, False): YearType.SHALEM,
    (2, 2, True): YearType.SHALEM,
    (3, 0, False): YearType.KSEDER,
    (3, 2, True): YearType.KSEDER,
    (5, 2, False): YearType.KSEDER,
    (5, 3, True): YearType.CHASER,
    (5, 3, False): YearType.SHALEM,
    (5, 5, True): YearType.SHALEM,
    (0, 3, False): YearType.CHASER,
    (0, 5, True): YearType.CHASER,
    (0, 5, False): YearType.SHALEM,
    (0, 0, True): YearType.SHALEM,
}


def check_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidInputError(f"year must be an integer, got {year!r}")
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidInputError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
    return year


def is_leap(year: int) -> bool:
    """Leap years hold positions 3, 6, 8, 11, 14, 17 and 19 of the cycle."""
    return year % CYCLE_YEARS in LEAP_POSITIONS


def tishrei_molad(year: int) -> MoladTime:
    """
    Molad of Tishrei, with ``days`` left in absolute form.

    Whole cycles are scaled keeping weeks; the years into the current cycle
    are then added one at a time, dropping a week per step.
    """
    cycles, into_cycle = divmod(year - 1, CYCLE_YEARS)
    molad = MACHZOR.times(cycles).plus(BAHARAD)
    for i in range(1, into_cycle + 1):
        molad = molad.add(LEAP_YEAR if is_leap(i) else REGULAR_YEAR)
    return molad


def rosh_hashana_weekday(year: int, molad: MoladTime) -> int:
    """Weekday of Rosh Hashana given the year's Tishrei molad; always 0, 2, 3 or 5."""
    days, hours, chalakim = molad.weekday, molad.hours, molad.chalakim
    weekday = days

    if hours >= 18:
        # Molad zaken: molad at or after noon
        weekday += 1
    elif not is_leap(year) and days == 3 and (hours > 9 or (hours == 9 and chalakim >= 204)):
        # GaTaRaD: Tuesday 9h 204ch in a regular year
        weekday += 1
    elif is_leap(year - 1) and days == 2 and (hours > 15 or (hours == 15 and chalakim >= 589)):
        # BeTUTaKPaT: Monday 15h 589ch right after a leap year
        weekday += 1

    if weekday in _LO_ADU:
        weekday += 1

    if weekday >= DAYS:
        weekday -= DAYS
    return weekday


def calculate_year_type(first: int, next_: int, leap: bool) -> YearType:
    return _YEAR_TYPES.get((first, next_, leap), YearType.INVALID)


@lru_cache(maxsize=None, typed=True)
def hebrew_year(year: int) -> HebrewYear:
    """Full year record; raises InvalidInputError outside 1..6000."""
    check_year(year)
    molad = tishrei_molad(year)
    first = rosh_hashana_weekday(year, molad)
    # next year is derived from its own molad only, without recursing into a record
    following = rosh_hashana_weekday(year + 1, tishrei_molad(year + 1))
    leap = is_leap(year)
    year_type = calculate_year_type(first, following, leap)
    if year_type is YearType.INVALID:
        raise CalendarInvariantError(
            f"year {year}: no year type for Rosh Hashana {first} -> {following} (leap={leap})"
        )
    return HebrewYear(
        year=year,
        is_leap=leap,
        molad=molad,
        rosh_hashana=first,
        year_type=year_type,
    )


def year_length(year: int) -> int:
    return hebrew_year(year).length
