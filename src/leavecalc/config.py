from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from leavecalc.calendar import DEFAULT_MAX_WALK_DAYS, REST_DAY, CalendarError, RestDay


@dataclass(frozen=True)
class Settings:
    # Boundary dates landing on this weekday raise a warning.
    rest_day: RestDay = REST_DAY

    # Upper bound on calendar days a forward/backward walk may visit.
    max_walk_days: int = DEFAULT_MAX_WALK_DAYS

    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_walk_days < 1:
            raise ValueError(f"max_walk_days must be at least 1; got {self.max_walk_days}.")


def _parse_rest_day(raw: str) -> RestDay:
    try:
        return RestDay.parse(raw)
    except CalendarError as e:
        raise RuntimeError(f"Invalid LEAVECALC_REST_DAY value: {raw!r}. Expected a weekday name.") from e


def _parse_max_walk_days(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise RuntimeError(f"Invalid LEAVECALC_MAX_WALK_DAYS value: {raw!r}. Expected an integer.") from e
    if value < 1:
        raise RuntimeError("LEAVECALC_MAX_WALK_DAYS must be >= 1")
    return value


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Invalid LOG_LEVEL value: {raw!r}")
    return level


def load_settings(dotenv_path: str | None = None) -> Settings:
    # Process environment wins over .env; dotenv_path allows overriding in tests.
    load_dotenv(dotenv_path=dotenv_path, override=False)

    return Settings(
        rest_day=_parse_rest_day(os.getenv("LEAVECALC_REST_DAY", REST_DAY.name)),
        max_walk_days=_parse_max_walk_days(
            os.getenv("LEAVECALC_MAX_WALK_DAYS", str(DEFAULT_MAX_WALK_DAYS))
        ),
        log_level=_parse_log_level(os.getenv("LOG_LEVEL", "WARNING")),
    )
