"""Application request/response contracts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from commute.domain.enums import CommuteMode
from commute.domain.exceptions import InvalidRouteRequest
from commute.domain.models import RouteLookup, RouteOption

REQUIRED_FIELDS = ("origin", "destination", "date", "time")


class RoutePlanRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    date: str = Field(min_length=1, description="ISO calendar date, e.g. 2025-12-03")
    time: str = Field(min_length=1, description="Departure time HH:MM, e.g. 06:57")


def parse_route_request(payload: Any) -> RoutePlanRequest:
    """Reject missing, non-string or blank fields before any lookup happens."""
    if not isinstance(payload, Mapping):
        raise InvalidRouteRequest(list(REQUIRED_FIELDS))

    missing = [
        name
        for name in REQUIRED_FIELDS
        if not isinstance(payload.get(name), str) or not payload[name].strip()
    ]
    if missing:
        raise InvalidRouteRequest(missing)
    return RoutePlanRequest(**{name: payload[name] for name in REQUIRED_FIELDS})


class CommutePlan(BaseModel):
    options: list[RouteOption] = Field(default_factory=list)
    lookups: dict[CommuteMode, RouteLookup] = Field(default_factory=dict)
    trace_id: str = ""

    @property
    def unavailable_modes(self) -> list[CommuteMode]:
        return [mode for mode, lookup in self.lookups.items() if not lookup.available]
