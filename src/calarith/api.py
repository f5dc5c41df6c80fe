from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .core.registry import CalendarRegistry
from .rules.factory import make_calendar
from .rules.interfaces import CalendarRuleProtocol
from .rules.specs import load_specs
from .values.instant import Instant

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(calendar: str) -> CalendarRuleProtocol:
    return _reg().get(calendar)

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def register_calendar(name: str, rule: CalendarRuleProtocol, *, overwrite: bool = False) -> None:
    _reg().register(name, rule, overwrite=overwrite)

def load_calendars(path: Union[str, Path], *, overwrite: bool = False) -> List[str]:
    """Register every calendar defined in a JSON file; returns their ids."""
    specs = load_specs(path)
    reg = _reg()
    # all or nothing: build every rule and check ids before touching the registry
    rules = {name: make_calendar(spec) for name, spec in specs.items()}
    if not overwrite:
        taken = sorted(set(rules) & set(reg.list()))
        if taken:
            raise KeyError(f"Calendar(s) {taken} already exist. Use overwrite=True to replace.")
    for name, rule in rules.items():
        reg.register(name, rule, overwrite=overwrite)
    return sorted(rules)

# ============================================================
# Construction surface
# ============================================================

def instant(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    *,
    calendar: str = "gregorian",
) -> Instant:
    return Instant.from_components(_reg().get(calendar), year, month, day, hour, minute, second, millisecond)

def days_in_month(year: int, month: int, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).days_in_month(year, month)

def field_ranges(year: int, month: int, *, calendar: str = "gregorian") -> Dict[str, Tuple[int, int]]:
    """Inclusive ranges of month..millisecond for an editor showing year/month."""
    rule = _reg().get(calendar)
    return {
        "month": (1, rule.months_in_year(year)),
        "day": (1, rule.days_in_month(year, month)),
        "hour": (0, rule.hours_in_day - 1),
        "minute": (0, rule.minutes_in_hour - 1),
        "second": (0, rule.seconds_in_minute - 1),
        "millisecond": (0, rule.milliseconds_in_second - 1),
    }

# ============================================================
# Persistence surface
# ============================================================

def dump_instant(value: Instant) -> Dict[str, str]:
    return {"calendar": _reg().id_of(value.calendar), "scalar": value.to_text()}

def load_instant(record: Mapping[str, str]) -> Instant:
    return Instant.parse(record["scalar"], _reg().get(record["calendar"]))
