"""Domain layer exports."""

from commute.domain.enums import CommuteMode
from commute.domain.models import RawModeResult, RouteLookup, RouteOption

__all__ = [
    "CommuteMode",
    "RawModeResult",
    "RouteLookup",
    "RouteOption",
]
