"""Static directions gateway backed by an in-memory or JSON route table.

File shape::

    {"routes": {"CAR": {"distance_km": 10.0, "eta_minutes": 20}, ...}}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from commute.domain.enums import CommuteMode, LookupFailure
from commute.domain.models import RawModeResult, RouteLookup


def load_fixture(path: str | Path) -> dict[CommuteMode, RawModeResult]:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)

    table: dict[CommuteMode, RawModeResult] = {}
    for name, row in (data.get("routes") or {}).items():
        table[CommuteMode(str(name).strip().upper())] = RawModeResult(
            distance_km=float(row["distance_km"]),
            eta_minutes=int(row["eta_minutes"]),
        )
    return table


class FixtureDirectionsGateway:
    """Answers every origin/destination pair from the same table."""

    def __init__(self, routes: Mapping[CommuteMode, RawModeResult]) -> None:
        self._routes = dict(routes)
        self.calls: list[tuple[str, str, CommuteMode]] = []

    @classmethod
    def from_file(cls, path: str | Path) -> FixtureDirectionsGateway:
        return cls(load_fixture(path))

    def is_configured(self) -> bool:
        return True

    def fetch_route(self, origin: str, destination: str, mode: CommuteMode) -> RouteLookup:
        mode = CommuteMode(mode)
        self.calls.append((origin, destination, mode))
        route = self._routes.get(mode)
        if route is None:
            return RouteLookup.unavailable(mode, LookupFailure.NO_ROUTE)
        return RouteLookup.found(mode, route)
