"""
leavecalc
~~~~~~~~~

Vacation and leave date arithmetic: given two of start date, end date and
duration, plus a list of holidays, compute the third.  Holidays do not count
toward a leave; both boundary dates do.
"""

from leavecalc.calendar import CalendarError, LeaveCalendar, RestDay
from leavecalc.config import Settings, load_settings
from leavecalc.engine import (
    CalculationMode,
    CalculationResult,
    FailureKind,
    calculate,
)
from leavecalc.holidays import parse_holidays

__all__ = [
    "CalculationMode",
    "CalculationResult",
    "CalendarError",
    "FailureKind",
    "LeaveCalendar",
    "RestDay",
    "Settings",
    "calculate",
    "load_settings",
    "parse_holidays",
]
