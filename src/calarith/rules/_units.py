"""
calarith.rules._units
---------------------
Field handling shared by every rule: unit-size checks, clamping, strict
validation and the time-of-day split of a scalar.
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..core.errors import CalendarConfigError, CalendarRangeError
from .interfaces import CalendarRuleProtocol, Fields

logger = logging.getLogger(__name__)


def check_unit_sizes(
    hours_in_day: int,
    minutes_in_hour: int,
    seconds_in_minute: int,
    milliseconds_in_second: int,
) -> None:
    for label, value in (
        ("hours_in_day", hours_in_day),
        ("minutes_in_hour", minutes_in_hour),
        ("seconds_in_minute", seconds_in_minute),
        ("milliseconds_in_second", milliseconds_in_second),
    ):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise CalendarConfigError(f"{label} must be a positive integer; got {value!r}")


def clamp(value: int, lo: int, hi: int) -> int:
    return lo if value < lo else hi if value > hi else value


def clock_to_units(rule: CalendarRuleProtocol, hour: int, minute: int, second: int, millisecond: int) -> int:
    """Base units elapsed since midnight."""
    return ((hour * rule.minutes_in_hour + minute) * rule.seconds_in_minute + second) \
        * rule.milliseconds_in_second + millisecond


def units_to_clock(rule: CalendarRuleProtocol, units: int) -> Tuple[int, int, int, int]:
    """Inverse of clock_to_units for 0 <= units < units_per_day."""
    units, millisecond = divmod(units, rule.milliseconds_in_second)
    units, second = divmod(units, rule.seconds_in_minute)
    hour, minute = divmod(units, rule.minutes_in_hour)
    return hour, minute, second, millisecond


def split_scalar(rule: CalendarRuleProtocol, scalar: int) -> Tuple[int, int]:
    """
    (day, units into that day). Floor division keeps the remainder
    non-negative on both sides of the epoch, so scalar -1 is the last unit
    of day -1.
    """
    return divmod(scalar, rule.units_per_day)


def clamp_fields(
    rule: CalendarRuleProtocol,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
) -> Fields:
    """Lenient normalisation applied by to_scalar."""
    raw = (year, month, day, hour, minute, second, millisecond)
    if year == 0:
        year = 1
    month = clamp(month, 1, rule.months_in_year(year))
    day = clamp(day, 1, rule.days_in_month(year, month))
    hour = clamp(hour, 0, rule.hours_in_day - 1)
    minute = clamp(minute, 0, rule.minutes_in_hour - 1)
    second = clamp(second, 0, rule.seconds_in_minute - 1)
    millisecond = clamp(millisecond, 0, rule.milliseconds_in_second - 1)
    fields = (year, month, day, hour, minute, second, millisecond)
    if fields != raw:
        logger.debug("%s: clamped %r to %r", rule.name, raw, fields)
    return fields


def check_fields(
    rule: CalendarRuleProtocol,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
) -> None:
    """Strict counterpart of clamp_fields. Year 0 (1 BCE) is accepted."""
    months = rule.months_in_year(year)
    if not 1 <= month <= months:
        raise CalendarRangeError(f"month {month} outside 1..{months} in {rule.name}")
    days = rule.days_in_month(year, month)
    if not 1 <= day <= days:
        raise CalendarRangeError(f"day {day} outside 1..{days} for {year}-{month:02d} in {rule.name}")
    for label, value, size in (
        ("hour", hour, rule.hours_in_day),
        ("minute", minute, rule.minutes_in_hour),
        ("second", second, rule.seconds_in_minute),
        ("millisecond", millisecond, rule.milliseconds_in_second),
    ):
        if not 0 <= value < size:
            raise CalendarRangeError(f"{label} {value} outside 0..{size - 1} in {rule.name}")
