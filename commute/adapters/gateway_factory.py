"""Concrete directions gateway selection and wiring."""

from __future__ import annotations

import logging

from commute.adapters.directions.fixture import FixtureDirectionsGateway
from commute.adapters.directions.google import GoogleDirectionsGateway
from commute.config.settings import DirectionsSettings
from commute.shared.exceptions import ToolError
from commute.tools.interfaces import DirectionsGateway

_logger = logging.getLogger("commute.adapters")


def build_directions_gateway(settings: DirectionsSettings) -> DirectionsGateway:
    if settings.provider == "fixture":
        if not settings.fixture_file:
            raise ToolError("directions", "DIRECTIONS_PROVIDER=fixture requires DIRECTIONS_FIXTURE_FILE")
        return FixtureDirectionsGateway.from_file(settings.fixture_file)

    if not settings.has_credentials:
        _logger.warning("%s is not set; route planning requests will fail", settings.api_key_env)
    return GoogleDirectionsGateway(settings)


def describe_gateway(gateway: DirectionsGateway) -> dict[str, object]:
    return {
        "gateway": type(gateway).__name__,
        "configured": gateway.is_configured(),
    }


__all__ = ["build_directions_gateway", "describe_gateway"]
