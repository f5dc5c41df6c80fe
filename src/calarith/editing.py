"""
calarith.editing
----------------
Mutable drafts for field-by-field editors.

An InstantDraft holds loose field values while a user edits them, keeps
each one inside the range the calendar currently allows, and hands back
whole Instant values. Instants themselves are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .rules._units import clamp
from .rules.interfaces import CalendarRuleProtocol
from .values.instant import FIELD_NAMES, Instant

Listener = Callable[[str], None]


@dataclass
class InstantDraft:
    calendar: CalendarRuleProtocol
    year: int = 1
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    _listeners: List[Listener] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_instant(cls, instant: Instant) -> "InstantDraft":
        return cls(instant.calendar, *instant.fields)

    def field_range(self, name: str) -> Tuple[Optional[int], Optional[int]]:
        """Inclusive (lo, hi) for a field given the other current values. Years are unbounded."""
        cal = self.calendar
        if name == "year":
            return None, None
        if name == "month":
            return 1, cal.months_in_year(self.year)
        if name == "day":
            month = clamp(self.month, 1, cal.months_in_year(self.year))
            return 1, cal.days_in_month(self.year, month)
        if name == "hour":
            return 0, cal.hours_in_day - 1
        if name == "minute":
            return 0, cal.minutes_in_hour - 1
        if name == "second":
            return 0, cal.seconds_in_minute - 1
        if name == "millisecond":
            return 0, cal.milliseconds_in_second - 1
        raise KeyError(f"Unknown field '{name}'. Available: {list(FIELD_NAMES)}")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change callback; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, name: str, value: int) -> int:
        """Assign a clamped value, re-clamp dependent fields and notify. Returns the stored value."""
        lo, hi = self.field_range(name)
        if lo is not None:
            value = clamp(value, lo, hi)
        self._assign(name, value)
        if name in ("year", "month"):
            for dependent in ("month", "day"):
                lo, hi = self.field_range(dependent)
                self._assign(dependent, clamp(getattr(self, dependent), lo, hi))
        return getattr(self, name)

    def load(self, instant: Instant) -> None:
        """Replace every field with those of `instant`."""
        if instant.calendar is not self.calendar:
            self.calendar = instant.calendar
            self._notify("calendar")
        for name, value in zip(FIELD_NAMES, instant.fields):
            self._assign(name, value)

    def to_instant(self) -> Instant:
        return Instant.from_components(
            self.calendar, self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.millisecond,
        )

    def _assign(self, name: str, value: int) -> None:
        if getattr(self, name) != value:
            setattr(self, name, value)
            self._notify(name)

    def _notify(self, name: str) -> None:
        for listener in list(self._listeners):
            listener(name)
