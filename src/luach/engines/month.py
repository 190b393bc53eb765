"""
luach.engines.month
-------------------
Month-level derivations on top of a year record: molad, Rosh Chodesh weekday,
length and name of each month.

Months are numbered in two ways.

* normalized: Tishrei = 1 ... Elul = 12, with Nissan always 7. In a leap year
  Adar I takes Adar's slot (6) and Adar II is 13, out of order.
* sequential: chronological from Tishrei = 1. In a leap year Adar II is 7 and
  Nissan .. Elul are 8 .. 13.

Lookups and names use the normalized number; anything that walks the year in
order (molad, Rosh Chodesh) uses the sequential one.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Tuple

from ..core.errors import InvalidInputError
from ..core.time import DAYS, NOSAR, MoladTime
from ..core.types import HebrewMonth, HebrewYear, YearType
from .year import hebrew_year

TISHREI, CHESHVAN, KISLEIV, TEVEIS, SHEVAT, ADAR = 1, 2, 3, 4, 5, 6
NISSAN, IYAR, SIVAN, TAMMUZ, AV, ELUL = 7, 8, 9, 10, 11, 12
ADAR_I = ADAR
ADAR_II = 13

CHASER = 29
MALEI = 30

REGULAR_MONTHS: Tuple[str, ...] = (
    "Tishrei", "Marcheshvan", "Kisleiv", "Teveis", "Shevat", "Adar",
    "Nissan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
)

# Adar Sheini sits at index 13, after Elul
LEAP_MONTHS: Tuple[str, ...] = (
    "Tishrei", "Marcheshvan", "Kisleiv", "Teveis", "Shevat", "Adar Rishon",
    "Nissan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
    "Adar Sheini",
)

# Spellings accepted by parse_month, keyed by their lowercased, space-free form
MONTH_ALIASES: Dict[str, int] = {
    "tishrei": TISHREI, "tishri": TISHREI,
    "cheshvan": CHESHVAN, "marcheshvan": CHESHVAN, "heshvan": CHESHVAN,
    "kisleiv": KISLEIV, "kislev": KISLEIV,
    "teveis": TEVEIS, "tevet": TEVEIS, "teves": TEVEIS,
    "shevat": SHEVAT, "shvat": SHEVAT,
    "adar": ADAR, "adari": ADAR_I, "adarrishon": ADAR_I,
    "adarii": ADAR_II, "adarsheini": ADAR_II, "adarsheni": ADAR_II, "adarbeis": ADAR_II,
    "nissan": NISSAN, "nisan": NISSAN,
    "iyar": IYAR, "iyyar": IYAR,
    "sivan": SIVAN,
    "tammuz": TAMMUZ, "tamuz": TAMMUZ,
    "av": AV,
    "elul": ELUL,
}


def months_in_year(leap: bool) -> int:
    return 13 if leap else 12


def check_month(month: int, leap: bool) -> int:
    """Validate a normalized month number; Adar II (13) exists only in leap years."""
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidInputError(f"month must be an integer, got {month!r}")
    if not (TISHREI <= month <= months_in_year(leap)):
        raise InvalidInputError(
            f"month must be in {TISHREI}..{months_in_year(leap)} "
            f"for a {'leap' if leap else 'regular'} year, got {month}"
        )
    return month


def parse_month(text: str) -> int:
    """Month number from digits or a transliterated name (``"Adar II"``, ``adar_sheini``)."""
    s = text.strip()
    if s.isdecimal():
        return int(s)
    key = s.lower().replace("_", "").replace("-", "").replace(" ", "").replace("'", "")
    if key not in MONTH_ALIASES:
        raise InvalidInputError(f"Unknown month '{text}'")
    return MONTH_ALIASES[key]


def to_sequential(month: int, leap: bool) -> int:
    check_month(month, leap)
    if not leap or month <= ADAR_I:
        return month
    if month == ADAR_II:
        return NISSAN
    return month + 1


def to_normalized(sequence: int, leap: bool) -> int:
    check_month(sequence, leap)
    if not leap or sequence <= ADAR_I:
        return sequence
    if sequence == NISSAN:
        return ADAR_II
    return sequence - 1


def month_name(month: int, leap: bool) -> str:
    check_month(month, leap)
    return (LEAP_MONTHS if leap else REGULAR_MONTHS)[month - 1]


def month_molad(tishrei: MoladTime, month: int, leap: bool) -> MoladTime:
    """Molad of a month: Tishrei's molad advanced one nosar per month, in order."""
    molad = tishrei.normalize_days()
    for _ in range(1, to_sequential(month, leap)):
        molad = molad.add(NOSAR)
    return molad


def month_length(month: int, leap: bool, year_type: YearType) -> int:
    check_month(month, leap)
    # Tishrei, Kisleiv, Shevat, Nissan, Sivan, Av are full
    length = MALEI if month % 2 else CHASER
    if leap:
        if month == ADAR_I:
            length = MALEI
        elif month == ADAR_II:
            length = CHASER
    if month == CHESHVAN and year_type is YearType.SHALEM:
        length = MALEI
    if month == KISLEIV and year_type is YearType.CHASER:
        length = CHASER
    return length


def rosh_chodesh(rosh_hashana: int, year_type: YearType, leap: bool, month: int) -> int:
    """Weekday of the first of the month: Rosh Hashana plus every earlier month, mod 7."""
    weekday = rosh_hashana
    for seq in range(1, to_sequential(month, leap)):
        weekday += month_length(to_normalized(seq, leap), leap, year_type)
    return weekday % DAYS


def make_month(year: HebrewYear, month: int) -> HebrewMonth:
    leap = year.is_leap
    check_month(month, leap)
    return HebrewMonth(
        year=year,
        month=month,
        sequence=to_sequential(month, leap),
        rosh_chodesh=rosh_chodesh(year.rosh_hashana, year.year_type, leap, month),
        length=month_length(month, leap, year.year_type),
        molad=month_molad(year.molad, month, leap),
        name=month_name(month, leap),
    )


@lru_cache(maxsize=None, typed=True)
def hebrew_month(year: int, month: int) -> HebrewMonth:
    return make_month(hebrew_year(year), month)


def year_months(year: int) -> List[HebrewMonth]:
    """All months of a year in chronological order."""
    leap = hebrew_year(year).is_leap
    return [hebrew_month(year, to_normalized(seq, leap)) for seq in range(1, months_in_year(leap) + 1)]
