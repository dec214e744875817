"""CommuteMode to provider travel-mode vocabulary."""

from __future__ import annotations

from types import MappingProxyType

from commute.domain.enums import CommuteMode

# The provider has no ride-sharing notion, so CARPOOL drives like CAR.
PROVIDER_TRAVEL_MODES = MappingProxyType({
    CommuteMode.CAR: "driving",
    CommuteMode.CARPOOL: "driving",
    CommuteMode.TRANSIT: "transit",
    CommuteMode.BIKE: "bicycling",
    CommuteMode.WALK: "walking",
})


def provider_travel_mode(mode: CommuteMode) -> str:
    return PROVIDER_TRAVEL_MODES[CommuteMode(mode)]
