"""
calarith.values.duration
------------------------
Calendar-independent signed spans of base units.

A Duration needs a calendar only to turn days/hours/minutes/seconds into
base units or back. Without one, the civil 24 h / 60 min / 60 s / 1000 ms
units are assumed; for calendars with other unit sizes that split is an
approximation and callers should pass the calendar.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

from ..rules._units import units_to_clock
from ..rules.gregorian import GREGORIAN
from ..rules.interfaces import CalendarRuleProtocol


@dataclass(frozen=True, order=True)
class Duration:
    units: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.units, int) or isinstance(self.units, bool):
            raise TypeError(f"Duration units must be an int; got {type(self.units).__name__}")

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def from_days(cls, days: int, calendar: CalendarRuleProtocol) -> "Duration":
        return cls(days * calendar.units_per_day)

    @classmethod
    def from_hours(cls, hours: int, calendar: CalendarRuleProtocol) -> "Duration":
        return cls(hours * calendar.units_per_hour)

    @classmethod
    def from_minutes(cls, minutes: int, calendar: CalendarRuleProtocol) -> "Duration":
        return cls(minutes * calendar.units_per_minute)

    @classmethod
    def from_seconds(cls, seconds: int, calendar: CalendarRuleProtocol) -> "Duration":
        return cls(seconds * calendar.milliseconds_in_second)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Duration":
        return cls(milliseconds)

    @classmethod
    def parse(cls, text: str) -> "Duration":
        return cls(int(text))

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def __add__(self, other: object) -> "Duration":
        if isinstance(other, Duration):
            return Duration(self.units + other.units)
        return NotImplemented

    def __sub__(self, other: object) -> "Duration":
        if isinstance(other, Duration):
            return Duration(self.units - other.units)
        return NotImplemented

    def __mul__(self, factor: object) -> "Duration":
        if isinstance(factor, int) and not isinstance(factor, bool):
            return Duration(self.units * factor)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Duration":
        return Duration(-self.units)

    def __abs__(self) -> "Duration":
        return Duration(abs(self.units))

    def __bool__(self) -> bool:
        return self.units != 0

    # ---------------------------------------------------------
    # Display
    # ---------------------------------------------------------

    def split(self, calendar: Optional[CalendarRuleProtocol] = None) -> Tuple[int, int, int, int, int]:
        """
        (days, hours, minutes, seconds, milliseconds) of the magnitude; the
        sign is that of `units`.
        """
        rule = calendar or GREGORIAN
        days, rest = divmod(abs(self.units), rule.units_per_day)
        return (days,) + units_to_clock(rule, rest)

    def in_days(self, calendar: Optional[CalendarRuleProtocol] = None) -> Fraction:
        rule = calendar or GREGORIAN
        return Fraction(self.units, rule.units_per_day)

    def format(self, calendar: Optional[CalendarRuleProtocol] = None) -> str:
        rule = calendar or GREGORIAN
        days, hours, minutes, seconds, millis = self.split(rule)
        width = len(str(rule.milliseconds_in_second - 1))
        sign = "-" if self.units < 0 else ""
        return f"{sign}{days}.{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:0{width}d}"

    def to_text(self) -> str:
        return str(self.units)

    def __str__(self) -> str:
        return self.format()
