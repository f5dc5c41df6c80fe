"""
calarith.values.instant
-----------------------
Immutable points in time of one calendar.

The scalar is canonical: equality, ordering and arithmetic all work on it,
and the fields shown to callers are always the calendar's reading of that
scalar. Instants of different rule objects never mix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ..core.errors import CalendarConfigError, CrossCalendarError
from ..rules.interfaces import CalendarRuleProtocol, Fields
from .duration import Duration

FIELD_NAMES = ("year", "month", "day", "hour", "minute", "second", "millisecond")


@dataclass(frozen=True, eq=False)
class Instant:
    scalar: int
    calendar: CalendarRuleProtocol
    _fields: Fields = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.calendar is None:
            raise CalendarConfigError("An Instant needs a calendar rule")
        if not isinstance(self.scalar, int) or isinstance(self.scalar, bool):
            raise TypeError(f"scalar must be an int; got {type(self.scalar).__name__}")
        object.__setattr__(self, "_fields", self.calendar.from_scalar(self.scalar))

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def from_components(
        cls,
        calendar: CalendarRuleProtocol,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "Instant":
        """
        Clamps out-of-range fields (see to_scalar); the stored fields are
        the normalised ones, not the raw input.
        """
        if calendar is None:
            raise CalendarConfigError("An Instant needs a calendar rule")
        return cls(calendar.to_scalar(year, month, day, hour, minute, second, millisecond), calendar)

    @classmethod
    def parse(cls, text: str, calendar: CalendarRuleProtocol) -> "Instant":
        """Inverse of to_text. Only checks that `text` is an integer."""
        return cls(int(text), calendar)

    @classmethod
    def epoch(cls, calendar: CalendarRuleProtocol) -> "Instant":
        return cls(0, calendar)

    def replace(self, **changes: int) -> "Instant":
        unknown = set(changes) - set(FIELD_NAMES)
        if unknown:
            raise TypeError(f"Unknown field(s): {sorted(unknown)}")
        values: Dict[str, Any] = dict(zip(FIELD_NAMES, self._fields))
        values.update(changes)
        return Instant.from_components(self.calendar, **values)

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    @property
    def fields(self) -> Fields:
        return self._fields

    @property
    def year(self) -> int:
        return self._fields[0]

    @property
    def month(self) -> int:
        return self._fields[1]

    @property
    def day(self) -> int:
        return self._fields[2]

    @property
    def hour(self) -> int:
        return self._fields[3]

    @property
    def minute(self) -> int:
        return self._fields[4]

    @property
    def second(self) -> int:
        return self._fields[5]

    @property
    def millisecond(self) -> int:
        return self._fields[6]

    @property
    def months_in_year(self) -> int:
        return self.calendar.months_in_year(self.year)

    @property
    def days_in_month(self) -> int:
        return self.calendar.days_in_month(self.year, self.month)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add(self, duration: Duration) -> "Instant":
        return Instant(self.scalar + duration.units, self.calendar)

    def add_days(self, days: int) -> "Instant":
        return self.add(Duration.from_days(days, self.calendar))

    def add_hours(self, hours: int) -> "Instant":
        return self.add(Duration.from_hours(hours, self.calendar))

    def add_minutes(self, minutes: int) -> "Instant":
        return self.add(Duration.from_minutes(minutes, self.calendar))

    def add_seconds(self, seconds: int) -> "Instant":
        return self.add(Duration.from_seconds(seconds, self.calendar))

    def add_milliseconds(self, milliseconds: int) -> "Instant":
        return self.add(Duration.from_milliseconds(milliseconds))

    def add_months(self, months: int) -> "Instant":
        """
        Calendar month step. The day of month is cut down to the target
        month's length (Jan 31 + 1 month -> end of February), never rolled
        over. The month count per year is taken from the current year.
        """
        year, month, day, *clock = self._fields
        years, month0 = divmod(month - 1 + months, self.calendar.months_in_year(year))
        return self._landing(year + years, month0 + 1, day, clock)

    def add_years(self, years: int) -> "Instant":
        year, month, day, *clock = self._fields
        return self._landing(year + years, month, day, clock)

    def _landing(self, year: int, month: int, day: int, clock: list) -> "Instant":
        month = min(month, self.calendar.months_in_year(year))
        day = min(day, self.calendar.days_in_month(year, month))
        return Instant(self.calendar.to_scalar_strict(year, month, day, *clock), self.calendar)

    def __add__(self, other: object) -> "Instant":
        if isinstance(other, Duration):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object):
        if isinstance(other, Duration):
            return Instant(self.scalar - other.units, self.calendar)
        if isinstance(other, Instant):
            self._check_calendar(other)
            return Duration(self.scalar - other.scalar)
        return NotImplemented

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def _check_calendar(self, other: "Instant") -> None:
        if other.calendar is not self.calendar:
            raise CrossCalendarError(
                f"Cannot combine instants of '{self.calendar.name}' and '{other.calendar.name}'"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return other.calendar is self.calendar and other.scalar == self.scalar

    def __hash__(self) -> int:
        return hash((id(self.calendar), self.scalar))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        self._check_calendar(other)
        return self.scalar < other.scalar

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        self._check_calendar(other)
        return self.scalar <= other.scalar

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        self._check_calendar(other)
        return self.scalar > other.scalar

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        self._check_calendar(other)
        return self.scalar >= other.scalar

    # ---------------------------------------------------------
    # Text forms
    # ---------------------------------------------------------

    def to_text(self) -> str:
        """Persistence form: the decimal scalar."""
        return str(self.scalar)

    def isoformat(self, milliseconds: bool = False) -> str:
        year, month, day, hour, minute, second, millis = self._fields
        sign = "-" if year < 0 else ""
        text = f"{sign}{abs(year):04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}"
        if milliseconds:
            width = len(str(self.calendar.milliseconds_in_second - 1))
            text += f".{millis:0{width}d}"
        return text

    def __str__(self) -> str:
        return f"{self.isoformat()} ({self.calendar.name})"

    def __repr__(self) -> str:
        return f"Instant({', '.join(str(v) for v in self._fields)}, calendar={self.calendar.name!r})"
