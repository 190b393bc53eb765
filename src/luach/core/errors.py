class LuachError(Exception):
    """Base error."""

class InvalidInputError(LuachError, ValueError):
    """Raised when a molad field, year number or month number is out of range."""

class CalendarInvariantError(LuachError, AssertionError):
    """Raised when the engine derives a combination the calendar rules forbid."""
