from __future__ import annotations

import logging
import re
from typing import FrozenSet, Optional

from leavecalc.calendar.dates import date_key, parse_date

logger = logging.getLogger(__name__)

HolidaySet = FrozenSet[str]

_SEPARATORS = re.compile(r"[,;\s]+")


def parse_holidays(text: Optional[str]) -> HolidaySet:
    """Parse free text into a set of ``YYYY-MM-DD`` holiday keys.

    Tokens are separated by any run of commas, semicolons or whitespace
    (newlines included).  Tokens that are not valid calendar dates are
    dropped; parsing never fails as a whole.
    """
    if not text:
        return frozenset()

    keys: set[str] = set()
    for token in _SEPARATORS.split(text):
        if not token:
            continue
        day = parse_date(token)
        if day is None:
            logger.debug("Ignoring unparseable holiday token %r", token)
            continue
        keys.add(date_key(day))
    return frozenset(keys)
