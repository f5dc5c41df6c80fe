"""
calarith.rules.factory
----------------------
Transforms pure data specifications into live calendar rules.
"""

from __future__ import annotations

from ..core.errors import CalendarConfigError
from .gregorian import GREGORIAN
from .interfaces import CalendarRuleProtocol
from .simple import SimpleCalendarRule
from .specs import CalendarSpec


def make_calendar(spec: CalendarSpec) -> CalendarRuleProtocol:
    """The universal entry point. Gregorian specs all share one rule object."""
    if spec.kind == "gregorian":
        return GREGORIAN
    if spec.kind == "simple":
        return SimpleCalendarRule(
            days_in_months=spec.days_in_months,
            hours_in_day=spec.hours_in_day,
            minutes_in_hour=spec.minutes_in_hour,
            seconds_in_minute=spec.seconds_in_minute,
            milliseconds_in_second=spec.milliseconds_in_second,
            name=spec.name or "Simple Custom Calendar",
        )
    raise CalendarConfigError(f"Unknown calendar kind: {spec.kind!r}")
