"""
luach.core.time
---------------
Mixed-radix molad time: a week of 7 days counted from Shabbos (0), a day of
24 hours counted from nightfall, an hour of 1080 chalakim.

``days`` is either a weekday (0..6) or an absolute count of days; the
``plus``/``times`` operations keep whole weeks, ``add``/``multiply`` drop them.
All operations return new values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidInputError

DAYS = 7
HOURS = 24
CHALAKIM = 1080

# 18 chalakim to the minute
CHALAKIM_PER_MINUTE = CHALAKIM // 60

WEEKDAYS: Tuple[str, ...] = (
    "Shabbos", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
)


def _check_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class MoladClock:
    """A molad re-based to midnight, ready for display."""
    weekday: int
    hour: int          # 0..23, hours past midnight
    minute: int
    chalakim: int      # 0..17, leftover parts of a minute

    @property
    def weekday_name(self) -> str:
        return WEEKDAYS[self.weekday]

    @property
    def time_of_day(self) -> str:
        if self.hour >= 18:
            return "evening"
        if self.hour < 6:
            return "predawn"
        if self.hour < 12:
            return "morning"
        return "afternoon"

    @property
    def hour12(self) -> int:
        return self.hour % 12 or 12

    @property
    def meridiem(self) -> str:
        return "AM" if self.hour < 12 else "PM"

    def __str__(self) -> str:
        unit = "chelek" if self.chalakim == 1 else "chalakim"
        return (
            f"The molad is {self.weekday_name} {self.time_of_day}, "
            f"{self.hour12}:{self.minute:02d} {self.meridiem} and {self.chalakim} {unit}."
        )


@dataclass(frozen=True)
class MoladTime:
    days: int = 0
    hours: int = 0
    chalakim: int = 0

    def __post_init__(self) -> None:
        d = _check_int("days", self.days)
        h = _check_int("hours", self.hours)
        c = _check_int("chalakim", self.chalakim)
        if d < 0:
            raise InvalidInputError(f"days must be non-negative, got {d}")
        if not (0 <= h < HOURS):
            raise InvalidInputError(f"hours must be in 0..{HOURS - 1}, got {h}")
        if not (0 <= c < CHALAKIM):
            raise InvalidInputError(f"chalakim must be in 0..{CHALAKIM - 1}, got {c}")

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus(self, other: MoladTime) -> MoladTime:
        """Sum with carries, keeping whole weeks."""
        c = self.chalakim + other.chalakim
        h = self.hours + other.hours + c // CHALAKIM
        d = self.days + other.days + h // HOURS
        return MoladTime(d, h % HOURS, c % CHALAKIM)

    def add(self, other: MoladTime) -> MoladTime:
        """
        Sum that drops a single week.

        At most one week is removed, so ``self`` is expected to be a weekday
        and ``other`` a week-dropped increment.
        """
        m = self.plus(other)
        if m.days >= DAYS:
            return MoladTime(m.days - DAYS, m.hours, m.chalakim)
        return m

    def times(self, factor: int) -> MoladTime:
        """Scale each field by ``factor`` and cascade the carries; weeks are kept."""
        k = _check_int("factor", factor)
        if k < 0:
            raise InvalidInputError(f"factor must be non-negative, got {k}")
        c = self.chalakim * k
        h = self.hours * k + c // CHALAKIM
        d = self.days * k + h // HOURS
        return MoladTime(d, h % HOURS, c % CHALAKIM)

    def multiply(self, factor: int) -> MoladTime:
        return self.times(factor).normalize_days()

    def normalize_days(self) -> MoladTime:
        return MoladTime(self.days % DAYS, self.hours, self.chalakim)

    # ---------------------------------------------------------
    # Views
    # ---------------------------------------------------------

    @property
    def weekday(self) -> int:
        return self.days % DAYS

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.days, self.hours, self.chalakim)

    def clock(self) -> MoladClock:
        """Re-base from hours past nightfall to hours past midnight (6 hours earlier)."""
        day = self.weekday
        hour = self.hours - 6
        if hour < 0:
            hour += HOURS
            day = (day - 1) % DAYS  # Shabbos wraps back to Friday
        return MoladClock(
            weekday=day,
            hour=hour,
            minute=self.chalakim // CHALAKIM_PER_MINUTE,
            chalakim=self.chalakim % CHALAKIM_PER_MINUTE,
        )

    def describe(self) -> str:
        return str(self.clock())

    def __str__(self) -> str:
        return (
            f"{self.days} day{'' if self.days == 1 else 's'}, "
            f"{self.hours} hour{'' if self.hours == 1 else 's'}, and "
            f"{self.chalakim} {'chelek' if self.chalakim == 1 else 'chalakim'}"
        )


# ============================================================
# CONSTANTS
# ============================================================

# Molad of Tishrei of year 1 ("BaHaRad"), one regular year before 6'14'0.
BAHARAD = MoladTime(2, 5, 204)

# Week-dropped increments ("nosar")
NOSAR = MoladTime(1, 12, 793)
REGULAR_YEAR = MoladTime(4, 8, 876)
LEAP_YEAR = MoladTime(5, 21, 589)
MACHZOR = MoladTime(2, 16, 595)

# Mean lengths with whole weeks kept
MONTH_LENGTH = MoladTime(29, 12, 793)
REGULAR_YEAR_LENGTH = MoladTime(354, 8, 876)
LEAP_YEAR_LENGTH = MoladTime(383, 21, 589)
MACHZOR_LENGTH = MoladTime(6939, 16, 595)
