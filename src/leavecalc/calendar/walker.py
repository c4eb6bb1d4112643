from __future__ import annotations

from datetime import date
from typing import AbstractSet, Callable

from ._exceptions import CalendarError, WalkLimitError
from .dates import date_key, predecessor, successor

# Roughly one hundred years of calendar days.
DEFAULT_MAX_WALK_DAYS: int = 36_600


def is_leave_day(day: date, holidays: AbstractSet[str]) -> bool:
    """A day counts toward a leave duration iff it is not a holiday."""
    return date_key(day) not in holidays


def count_inclusive_days(
    start: date,
    end: date,
    holidays: AbstractSet[str],
) -> int:
    """Number of non-holiday days in ``[start, end]``, both ends included."""
    if start > end:
        raise CalendarError(f"Start {start} must not be after end {end}.")

    days = 0
    current = start
    while current <= end:
        if is_leave_day(current, holidays):
            days += 1
        if current == end:
            break
        current = successor(current)
    return days


def advance_to_duration(
    start: date,
    duration: int,
    holidays: AbstractSet[str],
    *,
    max_steps: int = DEFAULT_MAX_WALK_DAYS,
) -> date:
    """Walk forward from ``start`` until ``duration`` leave days are used.

    The returned date is the day that used up the last leave day, so that
    ``count_inclusive_days(start, result, holidays) == duration``.
    """
    return _walk(start, duration, holidays, successor, max_steps)


def retreat_to_duration(
    end: date,
    duration: int,
    holidays: AbstractSet[str],
    *,
    max_steps: int = DEFAULT_MAX_WALK_DAYS,
) -> date:
    """Walk backward from ``end``; mirror image of :func:`advance_to_duration`."""
    return _walk(end, duration, holidays, predecessor, max_steps)


def _walk(
    origin: date,
    duration: int,
    holidays: AbstractSet[str],
    step: Callable[[date], date],
    max_steps: int,
) -> date:
    if duration < 1:
        raise CalendarError(f"Duration must be at least 1; got {duration}.")
    if max_steps < 1:
        raise CalendarError(f"max_steps must be at least 1; got {max_steps}.")

    remaining = duration
    current = origin
    for _ in range(max_steps):
        if is_leave_day(current, holidays):
            remaining -= 1
        if remaining == 0:
            return current
        try:
            current = step(current)
        except OverflowError:
            raise WalkLimitError(
                f"Walk from {origin} left the supported date range "
                f"with {remaining} leave day(s) still to place."
            ) from None

    raise WalkLimitError(
        f"Walk from {origin} did not place {duration} leave day(s) "
        f"within {max_steps} calendar days."
    )
