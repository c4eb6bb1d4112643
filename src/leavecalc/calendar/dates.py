from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Optional

ONE_DAY = timedelta(days=1)

# Strict ISO calendar day; date.fromisoformat alone also accepts 20240101.
_ISO_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(text: Optional[str]) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` into a date, or None for blank/invalid text."""
    if text is None:
        return None
    text = text.strip()
    if not _ISO_DAY.match(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def date_key(day: date) -> str:
    return day.isoformat()


def successor(day: date) -> date:
    return day + ONE_DAY


def predecessor(day: date) -> date:
    return day - ONE_DAY
