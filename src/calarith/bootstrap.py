from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from calarith.core.errors import CalendarConfigError
from calarith.core.registry import CalendarRegistry
from calarith.rules.factory import make_calendar
from calarith.rules.interfaces import CalendarRuleProtocol
from calarith.rules.specs import ALL_SPECS, load_specs

logger = logging.getLogger(__name__)

# JSON file with extra calendar definitions, read once at import
CONFIG_ENV = "CALARITH_CALENDARS"


def build_registry(config_path: Optional[str] = None) -> CalendarRegistry:
    """
    Built-in calendars plus those of `config_path`. Without a path the file
    named by CALARITH_CALENDARS is read; a broken one there is logged and
    skipped. A broken explicit path raises.
    """
    specs = dict(ALL_SPECS)
    if config_path is not None:
        logger.debug("reading calendars from %s", config_path)
        specs.update(load_specs(config_path))
    elif os.environ.get(CONFIG_ENV):
        env_path = os.environ[CONFIG_ENV]
        logger.debug("reading calendars from %s (%s)", env_path, CONFIG_ENV)
        try:
            specs.update(load_specs(env_path))
        except CalendarConfigError as e:
            logger.warning("ignoring %s: %s", CONFIG_ENV, e)

    calendars: Dict[str, CalendarRuleProtocol] = {}
    for name, spec in specs.items():
        calendars[name] = make_calendar(spec)
    return CalendarRegistry(calendars)
