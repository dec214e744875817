"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from commute.adapters.gateway_factory import build_directions_gateway
from commute.config.settings import DirectionsSettings, resolve_directions_settings
from commute.infrastructure.logging import StructuredLogger, get_logger
from commute.tools.interfaces import DirectionsGateway


@dataclass
class CommuteContext:
    settings: DirectionsSettings
    gateway: DirectionsGateway
    logger: StructuredLogger = field(default_factory=get_logger)


def make_commute_context(settings: Optional[DirectionsSettings] = None) -> CommuteContext:
    resolved = settings or resolve_directions_settings()
    return CommuteContext(
        settings=resolved,
        gateway=build_directions_gateway(resolved),
        logger=get_logger(),
    )
