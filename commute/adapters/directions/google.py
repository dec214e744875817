"""Google Directions gateway.

Environment: GOOGLE_MAPS_SERVER_API_KEY
Docs: https://developers.google.com/maps/documentation/directions/get-directions
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from commute.adapters.directions.modes import provider_travel_mode
from commute.config.settings import DirectionsSettings
from commute.domain.enums import CommuteMode, LookupFailure
from commute.domain.models import RawModeResult, RouteLookup
from commute.security.http_client import SecureHttpClient
from commute.security.key_manager import get_key_manager
from commute.shared.exceptions import ToolError, ToolTimeoutError
from commute.shared.numbers import round_to_int

_DIRECTIONS_PATH = "/maps/api/directions/json"
_LOGGER = logging.getLogger("commute.directions")


def _first_dict(items: Any) -> Optional[dict[str, Any]]:
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        return None
    return items[0]


def _field_value(leg: dict[str, Any], name: str) -> Any:
    field = leg.get(name)
    return field.get("value") if isinstance(field, dict) else None


def parse_first_leg(data: dict[str, Any]) -> tuple[Optional[RawModeResult], Optional[LookupFailure]]:
    """Pull distance/duration from the first route's first leg; never raises."""
    status = data.get("status")
    if status is not None and status != "OK":
        return None, LookupFailure.PROVIDER_STATUS if status != "ZERO_RESULTS" else LookupFailure.NO_ROUTE

    route = _first_dict(data.get("routes"))
    leg = _first_dict(route.get("legs")) if route is not None else None
    if leg is None:
        return None, LookupFailure.NO_ROUTE

    distance_m = _field_value(leg, "distance")
    duration_s = _field_value(leg, "duration")
    if distance_m is None or duration_s is None:
        return None, LookupFailure.MISSING_FIELDS

    try:
        distance_m = float(distance_m)
        duration_s = float(duration_s)
    except (TypeError, ValueError):
        return None, LookupFailure.MISSING_FIELDS
    if not (math.isfinite(distance_m) and math.isfinite(duration_s)):
        return None, LookupFailure.MISSING_FIELDS
    return RawModeResult(distance_km=distance_m / 1000, eta_minutes=round_to_int(duration_s / 60)), None


class GoogleDirectionsGateway:
    """One directions query per call; no retries, no caching."""

    def __init__(self, settings: DirectionsSettings, http: Optional[SecureHttpClient] = None) -> None:
        self._settings = settings
        self._url = settings.base_url.rstrip("/") + _DIRECTIONS_PATH
        self._http = http or SecureHttpClient(
            timeout=settings.timeout_seconds,
            tool_name="google_directions",
        )

    def is_configured(self) -> bool:
        return self._settings.has_credentials

    def fetch_route(self, origin: str, destination: str, mode: CommuteMode) -> RouteLookup:
        mode = CommuteMode(mode)
        if not self.is_configured():
            return RouteLookup.unavailable(mode, LookupFailure.NOT_CONFIGURED)

        params = {
            "origin": origin,
            "destination": destination,
            "mode": provider_travel_mode(mode),
            "key": self._settings.api_key,
        }
        try:
            data = self._http.get(self._url, params=params)
        except ToolTimeoutError as exc:
            _LOGGER.error("Directions API timeout for %s: %s", mode.value, get_key_manager().scrub_text(str(exc)))
            return RouteLookup.unavailable(mode, LookupFailure.TIMEOUT)
        except ToolError as exc:
            _LOGGER.error("Directions API error for %s: %s", mode.value, get_key_manager().scrub_text(str(exc)))
            return RouteLookup.unavailable(mode, LookupFailure.HTTP_ERROR)

        route, failure = parse_first_leg(data)
        if route is None:
            _LOGGER.warning(
                "No usable route for mode %s (%s, provider status=%s)",
                mode.value,
                failure.value if failure else "unknown",
                data.get("status"),
            )
            return RouteLookup.unavailable(mode, failure or LookupFailure.NO_ROUTE)
        return RouteLookup.found(mode, route)
