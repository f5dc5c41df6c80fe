"""
calarith.rules.specs
--------------------
Pure data descriptions of calendars, and their JSON form.

A calendar file looks like:

    {"calendars": {
        "harptos": {"kind": "simple", "name": "Harptos",
                    "days_in_months": [30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30]},
        "long-day": {"kind": "simple", "days_in_months": [40, 40, 40], "hours_in_day": 30}
    }}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Literal, Tuple, Union

from ..core.errors import CalendarConfigError
from ._units import check_unit_sizes

logger = logging.getLogger(__name__)

SpecKind = Literal["gregorian", "simple"]
KINDS = ("gregorian", "simple")

_UNIT_KEYS = ("hours_in_day", "minutes_in_hour", "seconds_in_minute", "milliseconds_in_second")


@dataclass(frozen=True)
class CalendarSpec:
    kind: SpecKind
    name: str = ""
    days_in_months: Tuple[int, ...] = ()
    hours_in_day: int = 24
    minutes_in_hour: int = 60
    seconds_in_minute: int = 60
    milliseconds_in_second: int = 1000

    def tweak(self, **kwargs: Any) -> "CalendarSpec":
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        if self.kind == "gregorian":
            return {"kind": "gregorian"}
        out: Dict[str, Any] = {"kind": self.kind, "days_in_months": list(self.days_in_months)}
        if self.name:
            out["name"] = self.name
        for key in _UNIT_KEYS:
            out[key] = getattr(self, key)
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalendarSpec":
        if not isinstance(data, dict):
            raise CalendarConfigError(f"Calendar definition must be an object; got {type(data).__name__}")
        kind = data.get("kind")
        if kind not in KINDS:
            raise CalendarConfigError(f"Unknown calendar kind {kind!r}. Available: {list(KINDS)}")
        if kind == "gregorian":
            return GREGORIAN_SPEC

        unknown = set(data) - {"kind", "name", "days_in_months", *_UNIT_KEYS}
        if unknown:
            raise CalendarConfigError(f"Unknown calendar keys: {sorted(unknown)}")
        months = data.get("days_in_months")
        if not isinstance(months, list) or not months:
            raise CalendarConfigError("'days_in_months' must be a non-empty list of integers")
        for d in months:
            if not isinstance(d, int) or isinstance(d, bool) or d <= 0:
                raise CalendarConfigError(f"Month lengths must be positive integers; got {d!r}")
        units = {key: data[key] for key in _UNIT_KEYS if key in data}
        check_unit_sizes(*(units.get(key, getattr(cls, key)) for key in _UNIT_KEYS))
        return cls(kind=kind, name=str(data.get("name", "")), days_in_months=tuple(months), **units)


GREGORIAN_SPEC = CalendarSpec(kind="gregorian", name="Gregorian Calendar")

# 12 x 30 days, 24 h days
SIMPLE_SPEC = CalendarSpec(kind="simple", name="Simple Custom Calendar", days_in_months=(30,) * 12)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "gregorian": GREGORIAN_SPEC,
    "simple": SIMPLE_SPEC,
}


def load_specs(path: Union[str, Path]) -> Dict[str, CalendarSpec]:
    """Read {"calendars": {id: definition}} from a JSON file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CalendarConfigError(f"{path}: cannot read ({e})") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CalendarConfigError(f"{path}: invalid JSON ({e})") from e

    calendars = data.get("calendars") if isinstance(data, dict) else None
    if not isinstance(calendars, dict):
        raise CalendarConfigError(f"{path}: expected an object with a 'calendars' mapping")

    specs = {}
    for calendar_id, definition in calendars.items():
        try:
            specs[calendar_id] = CalendarSpec.from_dict(definition)
        except CalendarConfigError as e:
            raise CalendarConfigError(f"{path}: calendar '{calendar_id}': {e}") from e
    logger.debug("loaded %d calendar definition(s) from %s", len(specs), path)
    return specs
