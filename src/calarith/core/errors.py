class CalarithError(Exception):
    """Base error."""

class CalendarConfigError(CalarithError, ValueError):
    """Raised when a calendar definition is malformed or missing."""

class CalendarRangeError(CalarithError, ValueError):
    """Raised when a month/day/time field lies outside the calendar's range."""

class CrossCalendarError(CalarithError, TypeError):
    """Raised when two instants of different calendars are combined."""
