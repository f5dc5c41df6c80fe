from .gregorian import GREGORIAN, GregorianCalendarRule
from .interfaces import CalendarRuleProtocol, Fields
from .simple import SimpleCalendarRule

__all__ = [
    "GREGORIAN",
    "GregorianCalendarRule",
    "SimpleCalendarRule",
    "CalendarRuleProtocol",
    "Fields",
]
