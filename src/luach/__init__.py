"""luach public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    year_info,
    month_info,
    year_months,
    molad,
    new_year_day,
    year_length,
    year_summary,
    resolve_year,
    resolve_month,
    set_config,
    get_config,
)
from .config import Config
from .core.errors import CalendarInvariantError, InvalidInputError, LuachError
from .core.time import MoladTime
from .core.types import HebrewMonth, HebrewYear, YearType
from .engines.year import is_leap

__version__ = "0.4.0"

__all__ = [
    "year_info",
    "month_info",
    "year_months",
    "molad",
    "new_year_day",
    "year_length",
    "year_summary",
    "resolve_year",
    "resolve_month",
    "set_config",
    "get_config",
    "Config",
    "LuachError",
    "InvalidInputError",
    "CalendarInvariantError",
    "MoladTime",
    "HebrewYear",
    "HebrewMonth",
    "YearType",
    "is_leap",
]
