"""Directions gateways."""

from commute.adapters.directions.fixture import FixtureDirectionsGateway, load_fixture
from commute.adapters.directions.google import GoogleDirectionsGateway, parse_first_leg
from commute.adapters.directions.modes import PROVIDER_TRAVEL_MODES, provider_travel_mode

__all__ = [
    "FixtureDirectionsGateway",
    "GoogleDirectionsGateway",
    "PROVIDER_TRAVEL_MODES",
    "load_fixture",
    "parse_first_leg",
    "provider_travel_mode",
]
