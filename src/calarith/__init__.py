"""calarith public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_calendar,
    calendar_info,
    register_calendar,
    load_calendars,
    instant,
    days_in_month,
    field_ranges,
    dump_instant,
    load_instant,
)
from .core.errors import CalarithError, CalendarConfigError, CalendarRangeError, CrossCalendarError
from .editing import InstantDraft
from .rules import GREGORIAN, GregorianCalendarRule, SimpleCalendarRule
from .values import Duration, Instant

__all__ = [
    "list_calendars",
    "get_calendar",
    "calendar_info",
    "register_calendar",
    "load_calendars",
    "instant",
    "days_in_month",
    "field_ranges",
    "dump_instant",
    "load_instant",
    "CalarithError",
    "CalendarConfigError",
    "CalendarRangeError",
    "CrossCalendarError",
    "InstantDraft",
    "GREGORIAN",
    "GregorianCalendarRule",
    "SimpleCalendarRule",
    "Duration",
    "Instant",
]
