"""
leavecalc.holidays
~~~~~~~~~~~~~~~~~~

Holiday lists as typed by a person: dates separated by commas, semicolons,
spaces or newlines, in any order, duplicates allowed.  Anything that is not a
``YYYY-MM-DD`` date is skipped.

    >>> sorted(parse_holidays("2024-01-01, 2024-01-01\\n2024-01-02 nope"))
    ['2024-01-01', '2024-01-02']
"""

from leavecalc.holidays.parser import HolidaySet, parse_holidays

__all__ = ["HolidaySet", "parse_holidays"]
