from __future__ import annotations

from datetime import date
from typing import AbstractSet, Iterable, Union

import numpy as np

from ._exceptions import CalendarError, WalkLimitError
from .dates import date_key, parse_date

DateLike = Union[date, str, "np.ndarray"]
IntLike = Union[int, "np.ndarray"]

_ONE_DAY = np.timedelta64(1, "D")
_FIRST_DAY = np.datetime64(date.min, "D")
_LAST_DAY = np.datetime64(date.max, "D")


class LeaveCalendar:
    """
    Compiled holiday calendar for vectorized leave arithmetic.

    The holiday set is compiled once into a ``numpy.busdaycalendar`` whose
    week mask marks every weekday as valid, so only holidays are skipped.
    count(), advance() and retreat() give the same answers as the scalar
    day walks in :mod:`leavecalc.calendar.walker`, for whole arrays at once.
    """

    _WEEKMASK: str = "1111111"

    def __init__(self, holidays: Iterable[Union[str, date]] = ()) -> None:
        keys: set[str] = set()
        for h in holidays:
            if isinstance(h, date):
                day = h
            else:
                day = parse_date(h) if isinstance(h, str) else None
            if day is None:
                raise CalendarError(f"Holiday must be a YYYY-MM-DD date; got {h!r}.")
            keys.add(date_key(day))
        self._holidays: frozenset[str] = frozenset(keys)
        self._busdaycal = np.busdaycalendar(
            weekmask=self._WEEKMASK,
            holidays=np.array(sorted(keys), dtype="datetime64[D]"),
        )

    # ── coercion ─────────────────────────────────────────────────────────

    @staticmethod
    def _as_days(values: DateLike) -> np.ndarray:
        try:
            return np.asarray(values, dtype="datetime64[D]")
        except ValueError as e:
            raise CalendarError(f"Cannot interpret {values!r} as calendar days.") from e

    @staticmethod
    def _as_durations(values: IntLike) -> np.ndarray:
        d = np.asarray(values, dtype=np.int64)
        if d.size and int(d.min()) < 1:
            raise CalendarError(f"Durations must be at least 1; got {int(d.min())}.")
        return d

    @staticmethod
    def _unwrap_days(result: np.ndarray, scalar: bool) -> Union[date, np.ndarray]:
        if result.size and (result.min() < _FIRST_DAY or result.max() > _LAST_DAY):
            raise WalkLimitError("Walk left the supported date range.")
        return np.asarray(result).item() if scalar else result

    # ── public queries ───────────────────────────────────────────────────

    def count(self, start: DateLike, end: DateLike) -> IntLike:
        """Non-holiday days in ``[start, end]`` per element."""
        s = self._as_days(start)
        e = self._as_days(end)
        scalar = s.ndim == 0 and e.ndim == 0
        s, e = np.broadcast_arrays(s, e)
        if (s > e).any():
            raise CalendarError("Every start must be on or before its end.")

        # busday_count is end-exclusive.
        result = np.busday_count(s, e + _ONE_DAY, busdaycal=self._busdaycal)
        return int(result) if scalar else np.asarray(result, dtype=np.int64)

    def advance(self, start: DateLike, duration: IntLike) -> Union[date, np.ndarray]:
        """End date of a leave of ``duration`` days beginning at ``start``."""
        s = self._as_days(start)
        d = self._as_durations(duration)
        scalar = s.ndim == 0 and d.ndim == 0
        result = np.busday_offset(
            s, d - 1, roll="forward", busdaycal=self._busdaycal
        )
        return self._unwrap_days(np.asarray(result), scalar)

    def retreat(self, end: DateLike, duration: IntLike) -> Union[date, np.ndarray]:
        """Start date of a leave of ``duration`` days finishing at ``end``."""
        e = self._as_days(end)
        d = self._as_durations(duration)
        scalar = e.ndim == 0 and d.ndim == 0
        result = np.busday_offset(
            e, -(d - 1), roll="backward", busdaycal=self._busdaycal
        )
        return self._unwrap_days(np.asarray(result), scalar)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def holidays(self) -> AbstractSet[str]:
        return self._holidays

    def __contains__(self, day: object) -> bool:
        if isinstance(day, date):
            day = date_key(day)
        return day in self._holidays

    def __repr__(self) -> str:
        return f"LeaveCalendar(holidays={len(self._holidays)})"
