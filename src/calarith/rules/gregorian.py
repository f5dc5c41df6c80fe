"""
calarith.rules.gregorian
------------------------
Proleptic Gregorian rule with astronomical year numbering.

Year offsets are found by block decomposition (400-year cycles, centuries,
4-year blocks, then at most three single years), so the cost of a
conversion does not grow with the distance from the epoch. Years before
year 0 are handled by mirroring: the leap pattern is symmetric
(year -y is leap iff year y is), so year -m is laid out like year m,
read backwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Tuple

from ..core.errors import CalendarRangeError
from ._units import check_fields, clamp_fields, clock_to_units, split_scalar, units_to_clock
from .interfaces import Fields

DAYS_IN_400_YEARS = 146097
# The first century of each cycle keeps the leap day of its century year.
CENTURY_DAYS = (36525, 36524, 36524, 36524)
DAYS_IN_4_YEARS = 1461
# The first 4-year block of a 36524-day century opens on a common year.
DAYS_IN_SHORT_4_YEARS = 1460

MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_TO_MONTH_365 = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
DAYS_TO_MONTH_366 = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)

# Days from the start of year 0 (a leap year) to the epoch, year 1.
EPOCH_OFFSET = 366


def is_leap_year(year: int) -> bool:
    """Valid for every astronomical year; Python's % follows the divisor's sign."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def _year_length(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def _days_to_year(year: int) -> int:
    """Days from the start of year 0 to the start of `year` (year >= 0)."""
    cycles, rest = divmod(year, 400)
    days = cycles * DAYS_IN_400_YEARS
    start = year - rest

    for length in CENTURY_DAYS:
        if rest < 100:
            break
        days += length
        rest -= 100
        start += 100

    quads, rest = divmod(rest, 4)
    if quads:
        days += quads * DAYS_IN_4_YEARS
        if start % 400:
            days -= 1
        start += 4 * quads

    for y in range(start, start + rest):
        days += _year_length(y)
    return days


def _year_from_days(days: int) -> Tuple[int, int]:
    """Inverse of _days_to_year: (year, day of year) for days >= 0 since year 0."""
    cycles, days = divmod(days, DAYS_IN_400_YEARS)
    year = cycles * 400

    for length in CENTURY_DAYS:
        if days < length:
            break
        days -= length
        year += 100

    if year % 400 and days >= DAYS_IN_SHORT_4_YEARS:
        days -= DAYS_IN_SHORT_4_YEARS
        year += 4

    quads, days = divmod(days, DAYS_IN_4_YEARS)
    year += 4 * quads

    # at most three steps
    while days >= _year_length(year):
        days -= _year_length(year)
        year += 1
    return year, days


def days_before_year(year: int) -> int:
    """Signed day count from the epoch to the first day of `year`."""
    if year >= 0:
        return _days_to_year(year) - EPOCH_OFFSET
    # year -m ends where mirrored year m begins, reflected across year 0
    return -_days_to_year(1 - year)


def year_and_day(day_number: int) -> Tuple[int, int]:
    """(year, 0-based day of year) for a signed day count from the epoch."""
    z = day_number + EPOCH_OFFSET
    if z >= 0:
        return _year_from_days(z)
    x = -(z + 1)
    mirrored, back = _year_from_days(x + EPOCH_OFFSET)
    return -mirrored, _year_length(mirrored) - 1 - back


@dataclass(frozen=True)
class GregorianCalendarRule:
    """
    24 h / 60 min / 60 s / 1000 ms. Use the shared GREGORIAN instance:
    instants only combine when they hold the same rule object.
    """
    name: str = field(default="Gregorian Calendar", init=False)
    hours_in_day: int = field(default=24, init=False)
    minutes_in_hour: int = field(default=60, init=False)
    seconds_in_minute: int = field(default=60, init=False)
    milliseconds_in_second: int = field(default=1000, init=False)

    @property
    def units_per_day(self) -> int:
        return self.hours_in_day * self.minutes_in_hour * self.seconds_in_minute * self.milliseconds_in_second

    @property
    def units_per_hour(self) -> int:
        return self.minutes_in_hour * self.seconds_in_minute * self.milliseconds_in_second

    @property
    def units_per_minute(self) -> int:
        return self.seconds_in_minute * self.milliseconds_in_second

    @property
    def mean_days_in_year(self) -> Fraction:
        return Fraction(DAYS_IN_400_YEARS, 400)

    # ---------------------------------------------------------
    # Structure queries
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def days_in_year(self, year: int) -> int:
        return _year_length(year)

    def months_in_year(self, year: int) -> int:
        return 12

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= 12:
            raise CalendarRangeError(f"month {month} outside 1..12 in {self.name}")
        if month == 2 and is_leap_year(year):
            return 29
        return MONTH_DAYS[month - 1]

    def days_before_month(self, year: int, month: int) -> int:
        if not 1 <= month <= 12:
            raise CalendarRangeError(f"month {month} outside 1..12 in {self.name}")
        table = DAYS_TO_MONTH_366 if is_leap_year(year) else DAYS_TO_MONTH_365
        return table[month - 1]

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_scalar(self, year: int, month: int = 1, day: int = 1, hour: int = 0,
                  minute: int = 0, second: int = 0, millisecond: int = 0) -> int:
        return self._compose(*clamp_fields(self, year, month, day, hour, minute, second, millisecond))

    def to_scalar_strict(self, year: int, month: int = 1, day: int = 1, hour: int = 0,
                         minute: int = 0, second: int = 0, millisecond: int = 0) -> int:
        check_fields(self, year, month, day, hour, minute, second, millisecond)
        return self._compose(year, month, day, hour, minute, second, millisecond)

    def validate(self, year: int, month: int = 1, day: int = 1, hour: int = 0,
                 minute: int = 0, second: int = 0, millisecond: int = 0) -> None:
        check_fields(self, year, month, day, hour, minute, second, millisecond)

    def _compose(self, year: int, month: int, day: int, hour: int,
                 minute: int, second: int, millisecond: int) -> int:
        days = days_before_year(year) + self.days_before_month(year, month) + day - 1
        return days * self.units_per_day + clock_to_units(self, hour, minute, second, millisecond)

    def from_scalar(self, scalar: int) -> Fields:
        day_number, units = split_scalar(self, scalar)
        year, doy = year_and_day(day_number)

        table = DAYS_TO_MONTH_366 if is_leap_year(year) else DAYS_TO_MONTH_365
        month = 1
        while doy >= table[month]:
            month += 1
        day = doy - table[month - 1] + 1

        hour, minute, second, millisecond = units_to_clock(self, units)
        return year, month, day, hour, minute, second, millisecond

    def info(self) -> Dict[str, Any]:
        return {
            "kind": "gregorian",
            "name": self.name,
            "hours_in_day": self.hours_in_day,
            "minutes_in_hour": self.minutes_in_hour,
            "seconds_in_minute": self.seconds_in_minute,
            "milliseconds_in_second": self.milliseconds_in_second,
            "months_in_year": 12,
            "mean_days_in_year": self.mean_days_in_year,
        }


GREGORIAN = GregorianCalendarRule()
