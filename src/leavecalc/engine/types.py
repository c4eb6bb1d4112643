from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from leavecalc.calendar import REST_DAY, CalendarError, RestDay, date_key
from leavecalc.holidays import HolidaySet


class CalculationMode(str, Enum):
    """Which of start, end and duration is being solved for."""

    DURATION = "duration"
    END = "end"
    START = "start"

    @classmethod
    def parse(cls, value: Union["CalculationMode", str]) -> "CalculationMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise CalendarError(f"Unknown calculation mode: {value!r}.") from None


class FailureKind(str, Enum):
    MISSING_INPUT = "MissingInput"
    INVALID_RANGE = "InvalidRange"
    INVALID_DURATION = "InvalidDuration"
    UNREACHABLE = "Unreachable"


class CalculationError(CalendarError):
    """Rejected calculation inputs, tagged with the failure kind to report."""

    def __init__(self, kind: FailureKind, reason: str) -> None:
        super().__init__(reason)
        self.kind = kind
        self.reason = reason


@dataclass(frozen=True)
class CalculationInput:
    start: Optional[date]
    end: Optional[date]
    duration: Optional[int]
    holidays: HolidaySet


@dataclass(frozen=True)
class CalculationResult:
    """
    Outcome of one calculation.

    On success ``start``, ``end`` and ``duration`` are all set (the solved
    one included) and ``failure`` is None.  On failure only ``failure`` and
    ``reason`` carry information.
    """

    mode: CalculationMode
    start: Optional[date] = None
    end: Optional[date] = None
    duration: Optional[int] = None
    start_is_rest_day: bool = False
    end_is_rest_day: bool = False
    rest_day: RestDay = REST_DAY
    failure: Optional[FailureKind] = None
    reason: str = ""

    @classmethod
    def failed(cls, mode: CalculationMode, error: CalculationError) -> "CalculationResult":
        return cls(mode=mode, failure=error.kind, reason=error.reason)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def value(self) -> Union[date, int, None]:
        if not self.ok:
            return None
        if self.mode is CalculationMode.DURATION:
            return self.duration
        if self.mode is CalculationMode.END:
            return self.end
        return self.start

    @property
    def value_text(self) -> str:
        value = self.value
        if value is None:
            return ""
        if isinstance(value, date):
            return date_key(value)
        return str(value)

    @property
    def warnings(self) -> list[str]:
        day = self.rest_day.name.capitalize()
        messages = []
        if self.start_is_rest_day:
            messages.append(f"The leave starts on a {day}.")
        if self.end_is_rest_day:
            messages.append(f"The leave ends on a {day}.")
        return messages
