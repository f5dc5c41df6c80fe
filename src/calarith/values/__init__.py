from .duration import Duration
from .instant import Instant

__all__ = ["Duration", "Instant"]
