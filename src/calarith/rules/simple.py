"""
calarith.rules.simple
---------------------
A user-defined calendar: a fixed list of month lengths, no leap years and
free unit sizes (a day need not have 24 hours).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from itertools import accumulate
from collections.abc import Sequence
from typing import Any, Dict, Tuple

from ..core.errors import CalendarConfigError, CalendarRangeError
from ._units import (
    check_fields,
    check_unit_sizes,
    clamp_fields,
    clock_to_units,
    split_scalar,
    units_to_clock,
)
from .interfaces import Fields


@dataclass(frozen=True)
class SimpleCalendarRule:
    days_in_months: Tuple[int, ...]
    hours_in_day: int = 24
    minutes_in_hour: int = 60
    seconds_in_minute: int = 60
    milliseconds_in_second: int = 1000
    name: str = "Simple Custom Calendar"

    _days_to_month: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        months = self.days_in_months
        if months is None or isinstance(months, (str, bytes)) or not isinstance(months, Sequence):
            raise CalendarConfigError(f"days_in_months must be a sequence of integers; got {months!r}")
        months = tuple(months)
        if not months:
            raise CalendarConfigError("days_in_months must not be empty")
        for d in months:
            if not isinstance(d, int) or isinstance(d, bool) or d <= 0:
                raise CalendarConfigError(f"Month lengths must be positive integers; got {d!r}")
        check_unit_sizes(self.hours_in_day, self.minutes_in_hour, self.seconds_in_minute, self.milliseconds_in_second)

        object.__setattr__(self, "days_in_months", months)
        object.__setattr__(self, "_days_to_month", (0,) + tuple(accumulate(months)))

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
        return Fraction(self._days_to_month[-1], 1)

    # ---------------------------------------------------------
    # Structure queries
    # ---------------------------------------------------------

    def days_in_year(self, year: int) -> int:
        return self._days_to_month[-1]

    def months_in_year(self, year: int) -> int:
        return len(self.days_in_months)

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= len(self.days_in_months):
            raise CalendarRangeError(f"month {month} outside 1..{len(self.days_in_months)} in {self.name}")
        return self.days_in_months[month - 1]

    def days_before_month(self, year: int, month: int) -> int:
        if not 1 <= month <= len(self.days_in_months):
            raise CalendarRangeError(f"month {month} outside 1..{len(self.days_in_months)} in {self.name}")
        return self._days_to_month[month - 1]

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
        # every year has the same length, on both sides of the epoch
        days = (year - 1) * self.days_in_year(year) + self._days_to_month[month - 1] + day - 1
        return days * self.units_per_day + clock_to_units(self, hour, minute, second, millisecond)

    def _year_and_day(self, day_number: int) -> Tuple[int, int]:
        year_days = self._days_to_month[-1]
        if day_number >= 0:
            years, doy = divmod(day_number, year_days)
            return 1 + years, doy
        # count back from the last day of year 0
        x = -(day_number + 1)
        years_back, back = divmod(x, year_days)
        return -years_back, year_days - 1 - back

    def from_scalar(self, scalar: int) -> Fields:
        day_number, units = split_scalar(self, scalar)
        year, doy = self._year_and_day(day_number)

        table = self._days_to_month
        month = 1
        while doy >= table[month]:
            month += 1
        day = doy - table[month - 1] + 1

        hour, minute, second, millisecond = units_to_clock(self, units)
        return year, month, day, hour, minute, second, millisecond

    def info(self) -> Dict[str, Any]:
        return {
            "kind": "simple",
            "name": self.name,
            "days_in_months": list(self.days_in_months),
            "hours_in_day": self.hours_in_day,
            "minutes_in_hour": self.minutes_in_hour,
            "seconds_in_minute": self.seconds_in_minute,
            "milliseconds_in_second": self.milliseconds_in_second,
            "months_in_year": len(self.days_in_months),
            "mean_days_in_year": self.mean_days_in_year,
        }
