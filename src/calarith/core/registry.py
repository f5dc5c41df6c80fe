from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from ..rules.interfaces import CalendarRuleProtocol

logger = logging.getLogger(__name__)


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarRuleProtocol]

    def get(self, calendar_id: str) -> CalendarRuleProtocol:
        if calendar_id not in self._calendars:
            raise KeyError(f"Unknown calendar '{calendar_id}'. Available: {sorted(self._calendars)}")
        return self._calendars[calendar_id]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, calendar_id: str, calendar: CalendarRuleProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (calendar_id in self._calendars):
            raise KeyError(f"Calendar '{calendar_id}' already exists. Use overwrite=True to replace.")
        logger.debug("registering calendar %r (%s)", calendar_id, calendar.name)
        self._calendars[calendar_id] = calendar

    def id_of(self, calendar: CalendarRuleProtocol) -> str:
        """Id under which this very rule object is registered."""
        for calendar_id, registered in self._calendars.items():
            if registered is calendar:
                return calendar_id
        raise KeyError(f"Calendar '{calendar.name}' is not registered")
