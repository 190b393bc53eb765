# tests/test_year.py

import pytest

from luach.core.errors import CalendarInvariantError, InvalidInputError
from luach.core.time import BAHARAD, MoladTime
from luach.core.types import YearType
from luach.engines.month import month_length, months_in_year, to_normalized
from luach.engines.year import (
    LEAP_POSITIONS,
    calculate_year_type,
    hebrew_year,
    is_leap,
    rosh_hashana_weekday,
    tishrei_molad,
    year_length,
)

SHABBOS, MONDAY, TUESDAY, THURSDAY = 0, 2, 3, 5


def test_leap_pattern():
    for r in range(19):
        assert is_leap(19 * 300 + r) == (r in LEAP_POSITIONS)


def test_seven_of_nineteen():
    for start in range(1, 400):
        assert sum(is_leap(y) for y in range(start, start + 19)) == 7


def test_known_leap_years():
    assert is_leap(5784)
    assert is_leap(5782)
    assert not is_leap(5783)
    assert not is_leap(2)


def test_epoch_molad():
    assert tishrei_molad(1) == BAHARAD
    # first real molad: Friday, 14 hours
    assert tishrei_molad(2) == MoladTime(6, 14, 0)


@pytest.mark.parametrize(
    "year, molad",
    [
        (5783, (2, 3, 6)),
        (5784, (6, 11, 882)),
        (5785, (5, 9, 391)),
        (5786, (2, 18, 187)),
        (5787, (0, 2, 1063)),
        (5788, (6, 0, 572)),
    ],
)
def test_tishrei_molad(year, molad):
    assert tishrei_molad(year).normalize_days().as_tuple() == molad


@pytest.mark.parametrize(
    "year, weekday, year_type, length",
    [
        (5783, MONDAY, YearType.SHALEM, 355),
        (5784, SHABBOS, YearType.CHASER, 383),
        (5785, THURSDAY, YearType.SHALEM, 355),
        (5786, TUESDAY, YearType.KSEDER, 354),
        (5787, SHABBOS, YearType.SHALEM, 385),
    ],
)
def test_known_years(year, weekday, year_type, length):
    y = hebrew_year(year)
    assert y.rosh_hashana == weekday
    assert y.year_type is year_type
    assert y.length == length == year_length(year)


def test_molad_zaken():
    assert rosh_hashana_weekday(5786, MoladTime(2, 18, 0)) == TUESDAY
    assert rosh_hashana_weekday(5786, MoladTime(2, 17, 1079)) == MONDAY
    # pushed onto Sunday, then off it
    assert rosh_hashana_weekday(5786, MoladTime(0, 18, 0)) == MONDAY
    # pushed onto Friday, then to Shabbos
    assert rosh_hashana_weekday(5786, MoladTime(5, 18, 0)) == SHABBOS
    # Friday noon wraps to Shabbos
    assert rosh_hashana_weekday(5786, MoladTime(6, 18, 0)) == SHABBOS


def test_gatarad():
    # 5786 is a regular year
    assert rosh_hashana_weekday(5786, MoladTime(3, 9, 204)) == THURSDAY
    assert rosh_hashana_weekday(5786, MoladTime(3, 10, 0)) == THURSDAY
    assert rosh_hashana_weekday(5786, MoladTime(3, 9, 203)) == TUESDAY
    # no postponement in a leap year
    assert rosh_hashana_weekday(5784, MoladTime(3, 9, 204)) == TUESDAY


def test_betutakpat():
    # 5785 follows the leap year 5784
    assert rosh_hashana_weekday(5785, MoladTime(2, 15, 589)) == TUESDAY
    assert rosh_hashana_weekday(5785, MoladTime(2, 16, 0)) == TUESDAY
    assert rosh_hashana_weekday(5785, MoladTime(2, 15, 588)) == MONDAY
    # 5786 follows a regular year
    assert rosh_hashana_weekday(5786, MoladTime(2, 15, 589)) == MONDAY


def test_lo_adu_rosh():
    assert rosh_hashana_weekday(5786, MoladTime(1, 0, 0)) == MONDAY
    assert rosh_hashana_weekday(5786, MoladTime(4, 0, 0)) == THURSDAY
    assert rosh_hashana_weekday(5786, MoladTime(6, 0, 0)) == SHABBOS


def test_absolute_days_use_weekday():
    assert rosh_hashana_weekday(5786, MoladTime(703, 9, 204)) == THURSDAY


def test_rosh_hashana_allowed_days_all_years():
    for year in range(1, 6001):
        y = hebrew_year(year)
        assert y.rosh_hashana in (SHABBOS, MONDAY, TUESDAY, THURSDAY)
        assert y.year_type is not YearType.INVALID


def test_year_lengths():
    for year in range(1, 6001):
        y = hebrew_year(year)
        if y.is_leap:
            assert y.length in (383, 384, 385)
        else:
            assert y.length in (353, 354, 355)


def test_year_length_is_sum_of_months():
    for year in range(1, 6001, 7):
        y = hebrew_year(year)
        total = sum(
            month_length(to_normalized(seq, y.is_leap), y.is_leap, y.year_type)
            for seq in range(1, months_in_year(y.is_leap) + 1)
        )
        assert total == y.length


def test_year_length_reaches_next_rosh_hashana():
    for year in range(5500, 5900):
        assert (hebrew_year(year).rosh_hashana + year_length(year)) % 7 == hebrew_year(year + 1).rosh_hashana


@pytest.mark.parametrize(
    "first, next_, leap, expected",
    [
        (MONDAY, THURSDAY, False, YearType.CHASER),
        (MONDAY, SHABBOS, True, YearType.CHASER),
        (MONDAY, SHABBOS, False, YearType.SHALEM),
        (MONDAY, MONDAY, True, YearType.SHALEM),
        (TUESDAY, SHABBOS, False, YearType.KSEDER),
        (TUESDAY, MONDAY, True, YearType.KSEDER),
        (THURSDAY, MONDAY, False, YearType.KSEDER),
        (THURSDAY, TUESDAY, True, YearType.CHASER),
        (THURSDAY, TUESDAY, False, YearType.SHALEM),
        (THURSDAY, THURSDAY, True, YearType.SHALEM),
        (SHABBOS, TUESDAY, False, YearType.CHASER),
        (SHABBOS, THURSDAY, True, YearType.CHASER),
        (SHABBOS, THURSDAY, False, YearType.SHALEM),
        (SHABBOS, SHABBOS, True, YearType.SHALEM),
        (TUESDAY, TUESDAY, False, YearType.INVALID),
        (MONDAY, THURSDAY, True, YearType.INVALID),
        (1, 2, False, YearType.INVALID),
    ],
)
def test_year_type_table(first, next_, leap, expected):
    assert calculate_year_type(first, next_, leap) is expected


def test_year_type_difference():
    assert [t.difference for t in (YearType.CHASER, YearType.KSEDER, YearType.SHALEM)] == [-1, 0, 1]
    with pytest.raises(CalendarInvariantError):
        YearType.INVALID.difference


@pytest.mark.parametrize("year", [0, -5, 6001, "5784", 5784.0, True])
def test_year_out_of_range(year):
    with pytest.raises(InvalidInputError):
        hebrew_year(year)


def test_idempotent():
    a = hebrew_year(5784)
    hebrew_year.cache_clear()
    b = hebrew_year(5784)
    assert a == b
    assert a is not b
    assert tishrei_molad(5784) == tishrei_molad(5784)
