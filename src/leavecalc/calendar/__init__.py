"""
leavecalc.calendar
~~~~~~~~~~~~~~~~~~

Calendar-day arithmetic for leave planning.  A leave duration counts every
calendar day between two boundary dates, both included, except the days in a
holiday set.  Dates are plain ``datetime.date`` values: no time of day and no
timezone, so stepping one day never drifts across a DST change.

Basic usage::

    from datetime import date
    from leavecalc.calendar import advance_to_duration, count_inclusive_days

    holidays = {"2024-01-03"}
    end = advance_to_duration(date(2024, 1, 1), 5, holidays)   # → 2024-01-06
    count_inclusive_days(date(2024, 1, 1), end, holidays)      # → 5

NumPy arrays are accepted by the compiled LeaveCalendar::

    import numpy as np
    from leavecalc.calendar import LeaveCalendar

    cal = LeaveCalendar(holidays)
    starts = np.array(["2024-01-01", "2024-02-01"], dtype="datetime64[D]")
    ends = cal.advance(starts, np.array([5, 10]))

Public API
----------
count_inclusive_days  Leave days in an inclusive date range.
advance_to_duration   Forward walk: end date from start and duration.
retreat_to_duration   Backward walk: start date from end and duration.
flag_rest_day         Whether a boundary date lands on the rest day.
RestDay, REST_DAY     Weekday enum and the default rest day (Sunday).
LeaveCalendar         Vectorized counterpart of the three walks.
CalendarError         Base exception for all calendar-related errors.
WalkLimitError        A walk could not place its duration.
"""

from __future__ import annotations

from leavecalc.calendar._exceptions import CalendarError, WalkLimitError
from leavecalc.calendar.batch import LeaveCalendar
from leavecalc.calendar.dates import date_key, parse_date, predecessor, successor
from leavecalc.calendar.rest_days import REST_DAY, RestDay, flag_rest_day
from leavecalc.calendar.walker import (
    DEFAULT_MAX_WALK_DAYS,
    advance_to_duration,
    count_inclusive_days,
    retreat_to_duration,
)

__all__ = [
    "CalendarError",
    "DEFAULT_MAX_WALK_DAYS",
    "LeaveCalendar",
    "REST_DAY",
    "RestDay",
    "WalkLimitError",
    "advance_to_duration",
    "count_inclusive_days",
    "date_key",
    "flag_rest_day",
    "parse_date",
    "predecessor",
    "retreat_to_duration",
    "successor",
]
