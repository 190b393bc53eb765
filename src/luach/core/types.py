from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import CalendarInvariantError
from .time import WEEKDAYS, MoladTime

# Length of a KSEDER year of twelve months; a leap month adds 30 days.
REGULAR_YEAR_DAYS = 354
LEAP_MONTH_DAYS = 30


class YearType(Enum):
    """Year length category; the value is the offset in days from a KSEDER year."""
    CHASER = -1   # Kisleiv has 29 days
    KSEDER = 0
    SHALEM = 1    # Cheshvan has 30 days
    INVALID = None

    @property
    def difference(self) -> int:
        if self.value is None:
            raise CalendarInvariantError("INVALID year type has no length offset")
        return self.value


@dataclass(frozen=True)
class HebrewYear:
    year: int
    is_leap: bool
    molad: MoladTime        # molad of Tishrei, absolute days
    rosh_hashana: int       # 0, 2, 3 or 5
    year_type: YearType

    @property
    def length(self) -> int:
        return REGULAR_YEAR_DAYS + self.year_type.difference + (LEAP_MONTH_DAYS if self.is_leap else 0)

    @property
    def months(self) -> int:
        return 13 if self.is_leap else 12

    @property
    def rosh_hashana_name(self) -> str:
        return WEEKDAYS[self.rosh_hashana]


@dataclass(frozen=True)
class HebrewMonth:
    year: HebrewYear
    month: int              # normalized: Nissan is 7 and Adar II is 13
    sequence: int           # chronological position from Tishrei = 1
    rosh_chodesh: int       # weekday of the first day
    length: int             # 29 or 30
    molad: MoladTime        # weekday form
    name: str
    debug: Optional[dict] = None

    @property
    def rosh_chodesh_name(self) -> str:
        return WEEKDAYS[self.rosh_chodesh]
