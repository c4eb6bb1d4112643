from __future__ import annotations

import logging
import re
from datetime import date
from typing import Optional, Union

from leavecalc.calendar import (
    WalkLimitError,
    advance_to_duration,
    count_inclusive_days,
    flag_rest_day,
    parse_date,
    retreat_to_duration,
)
from leavecalc.config import Settings
from leavecalc.holidays import parse_holidays

from .types import (
    CalculationError,
    CalculationInput,
    CalculationMode,
    CalculationResult,
    FailureKind,
)

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"^[+-]?\d+$")

# Far beyond any walk limit; keeps int() clear of the interpreter digit cap.
_MAX_DURATION_DIGITS = 18


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def _required_date(text: Optional[str], label: str) -> date:
    if _is_blank(text):
        raise CalculationError(FailureKind.MISSING_INPUT, f"The {label} date is required.")
    day = parse_date(text)
    if day is None:
        raise CalculationError(
            FailureKind.MISSING_INPUT,
            f"The {label} date {text.strip()!r} is not a YYYY-MM-DD date.",
        )
    return day


def _required_duration(text: Optional[str]) -> int:
    if _is_blank(text):
        raise CalculationError(FailureKind.INVALID_DURATION, "A duration of at least 1 day is required.")
    text = text.strip()
    if not _DECIMAL.match(text):
        raise CalculationError(
            FailureKind.INVALID_DURATION, f"The duration {text!r} is not a whole number of days."
        )
    if len(text.lstrip("+-")) > _MAX_DURATION_DIGITS:
        raise CalculationError(
            FailureKind.INVALID_DURATION, f"The duration has too many digits ({len(text)})."
        )
    duration = int(text)
    if duration < 1:
        raise CalculationError(
            FailureKind.INVALID_DURATION, f"The duration must be at least 1 day; got {duration}."
        )
    return duration


def validate(
    mode: Union[CalculationMode, str],
    start_text: Optional[str] = None,
    end_text: Optional[str] = None,
    duration_text: Optional[str] = None,
    holidays_text: Optional[str] = "",
) -> CalculationInput:
    """Check the raw inputs for ``mode`` and convert them.

    The input for the quantity being solved for is ignored.  Raises
    CalculationError tagged with the FailureKind to report.
    """
    mode = CalculationMode.parse(mode)
    holidays = parse_holidays(holidays_text)

    if mode is CalculationMode.DURATION:
        start = _required_date(start_text, "start")
        end = _required_date(end_text, "end")
        if end < start:
            raise CalculationError(
                FailureKind.INVALID_RANGE, f"The end date {end} is before the start date {start}."
            )
        return CalculationInput(start=start, end=end, duration=None, holidays=holidays)

    if mode is CalculationMode.END:
        start = _required_date(start_text, "start")
        duration = _required_duration(duration_text)
        return CalculationInput(start=start, end=None, duration=duration, holidays=holidays)

    end = _required_date(end_text, "end")
    duration = _required_duration(duration_text)
    return CalculationInput(start=None, end=end, duration=duration, holidays=holidays)


def _solve(mode: CalculationMode, request: CalculationInput, settings: Settings) -> CalculationResult:
    start, end, duration = request.start, request.end, request.duration

    if mode is CalculationMode.DURATION:
        duration = count_inclusive_days(start, end, request.holidays)
    elif mode is CalculationMode.END:
        end = advance_to_duration(
            start, duration, request.holidays, max_steps=settings.max_walk_days
        )
    else:
        start = retreat_to_duration(
            end, duration, request.holidays, max_steps=settings.max_walk_days
        )

    return CalculationResult(
        mode=mode,
        start=start,
        end=end,
        duration=duration,
        start_is_rest_day=flag_rest_day(start, settings.rest_day),
        end_is_rest_day=flag_rest_day(end, settings.rest_day),
        rest_day=settings.rest_day,
    )


def calculate(
    mode: Union[CalculationMode, str],
    start_text: Optional[str] = None,
    end_text: Optional[str] = None,
    duration_text: Optional[str] = None,
    holidays_text: Optional[str] = "",
    *,
    settings: Optional[Settings] = None,
) -> CalculationResult:
    """Solve for the quantity selected by ``mode``.

    Bad input never raises: it comes back as a failed CalculationResult
    whose ``failure`` names the FailureKind.
    """
    if settings is None:
        settings = Settings()
    mode = CalculationMode.parse(mode)
    logger.debug(
        "calculate mode=%s start=%r end=%r duration=%r",
        mode.value, start_text, end_text, duration_text,
    )

    try:
        request = validate(mode, start_text, end_text, duration_text, holidays_text)
    except CalculationError as e:
        logger.info("Calculation rejected (%s: %s)", e.kind.value, e.reason)
        return CalculationResult.failed(mode, e)

    try:
        result = _solve(mode, request, settings)
    except WalkLimitError as e:
        logger.warning("Calculation unreachable (%s)", e)
        return CalculationResult.failed(mode, CalculationError(FailureKind.UNREACHABLE, str(e)))

    logger.info("Calculated %s=%s with %d holiday(s)", mode.value, result.value_text, len(request.holidays))
    return result
