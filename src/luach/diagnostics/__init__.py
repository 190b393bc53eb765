"""Diagnostics package.

- pretty_month: console grid of one month
- new_years_table: Rosh Hashana weekday, year type and length over a range of years
"""

__all__ = ["pretty_month", "new_years_table"]
