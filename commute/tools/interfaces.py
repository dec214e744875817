"""Tool abstraction protocols."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from commute.domain.enums import CommuteMode
from commute.domain.models import RouteLookup


@runtime_checkable
class DirectionsGateway(Protocol):
    def fetch_route(self, origin: str, destination: str, mode: CommuteMode) -> RouteLookup:
        """Single best-effort lookup; failures come back as an unavailable RouteLookup."""

    def is_configured(self) -> bool:
        """Whether the gateway holds the credentials it needs."""


__all__ = ["DirectionsGateway"]
