class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class WalkLimitError(CalendarError):
    """A date walk could not reach its duration within the allowed span."""
