"""
calarith.rules.interfaces
-------------------------
The contract every calendar rule fulfils.

Scalar Reference Frame:
A scalar is a signed count of base units (the sub-second unit) since the
epoch, year 1 / month 1 / day 1 00:00:00.000 of the rule. Years use
astronomical numbering: year 0 is 1 BCE, year -1 is 2 BCE.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Dict, Protocol, Tuple

# (year, month, day, hour, minute, second, millisecond)
Fields = Tuple[int, int, int, int, int, int, int]


class CalendarRuleProtocol(Protocol):
    """
    Stateless, immutable calendar definition. Maps calendar fields to a
    scalar and back.
    """
    name: str
    hours_in_day: int
    minutes_in_hour: int
    seconds_in_minute: int
    milliseconds_in_second: int

    @property
    def units_per_day(self) -> int:
        ...

    @property
    def units_per_hour(self) -> int:
        ...

    @property
    def units_per_minute(self) -> int:
        ...

    @property
    def mean_days_in_year(self) -> Fraction:
        ...

    # ---------------------------------------------------------
    # 1. Structure queries
    # ---------------------------------------------------------
    def days_in_year(self, year: int) -> int:
        ...

    def months_in_year(self, year: int) -> int:
        ...

    def days_in_month(self, year: int, month: int) -> int:
        """Raises CalendarRangeError if month is outside [1, months_in_year(year)]."""
        ...

    def days_before_month(self, year: int, month: int) -> int:
        ...

    # ---------------------------------------------------------
    # 2. Conversions
    # ---------------------------------------------------------
    def to_scalar(self, year: int, month: int = 1, day: int = 1, hour: int = 0,
                  minute: int = 0, second: int = 0, millisecond: int = 0) -> int:
        """
        Total conversion. Out-of-range fields are clamped into range and
        year 0 is read as year 1.
        """
        ...

    def to_scalar_strict(self, year: int, month: int = 1, day: int = 1, hour: int = 0,
                         minute: int = 0, second: int = 0, millisecond: int = 0) -> int:
        """Raises CalendarRangeError instead of clamping. Year 0 is 1 BCE."""
        ...

    def validate(self, year: int, month: int = 1, day: int = 1, hour: int = 0,
                 minute: int = 0, second: int = 0, millisecond: int = 0) -> None:
        ...

    def from_scalar(self, scalar: int) -> Fields:
        """Exact inverse of to_scalar_strict."""
        ...

    def info(self) -> Dict[str, Any]:
        ...
