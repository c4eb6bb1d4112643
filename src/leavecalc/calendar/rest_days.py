from __future__ import annotations

from datetime import date
from enum import IntEnum

from ._exceptions import CalendarError


class RestDay(IntEnum):
    """Days of the week, numbered like ``date.weekday()`` (Monday-first week)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, name: str) -> "RestDay":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise CalendarError(f"Unknown day of the week: {name!r}.") from None


REST_DAY: RestDay = RestDay.SUNDAY


def flag_rest_day(day: date, rest_day: RestDay = REST_DAY) -> bool:
    return day.weekday() == rest_day
