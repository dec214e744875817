"""Directions settings resolution tests."""

from __future__ import annotations

import json

import pytest

from commute.adapters.directions.fixture import FixtureDirectionsGateway
from commute.adapters.directions.google import GoogleDirectionsGateway
from commute.adapters.gateway_factory import build_directions_gateway, describe_gateway
from commute.application.context import make_commute_context
from commute.config.settings import DEFAULT_BASE_URL, DirectionsSettings, resolve_directions_settings
from commute.domain.enums import CommuteMode
from commute.shared.exceptions import ToolError


def test_defaults_without_environment():
    settings = resolve_directions_settings()

    assert settings.provider == "google"
    assert settings.api_key is None
    assert not settings.has_credentials
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout_seconds == 10.0
    assert settings.fanout_timeout_seconds == 15.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_SERVER_API_KEY", "  server-key-123456  ")
    monkeypatch.setenv("DIRECTIONS_API_BASE_URL", "http://localhost:8081/")
    monkeypatch.setenv("DIRECTIONS_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("DIRECTIONS_FANOUT_TIMEOUT_SECONDS", "4")

    settings = resolve_directions_settings()

    assert settings.api_key == "server-key-123456"
    assert settings.has_credentials
    assert settings.base_url == "http://localhost:8081"
    assert settings.timeout_seconds == 2.5
    assert settings.fanout_timeout_seconds == 4.0


@pytest.mark.parametrize("raw", ["abc", "-1", "0", ""])
def test_invalid_timeouts_fall_back(monkeypatch, raw):
    monkeypatch.setenv("DIRECTIONS_TIMEOUT_SECONDS", raw)
    assert resolve_directions_settings().timeout_seconds == 10.0


def test_blank_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_SERVER_API_KEY", "   ")
    assert not resolve_directions_settings().has_credentials


def test_unknown_provider_falls_back_to_google(monkeypatch):
    monkeypatch.setenv("DIRECTIONS_PROVIDER", "carrier-pigeon")
    assert resolve_directions_settings().provider == "google"


def test_api_key_is_hidden_from_repr():
    assert "secret-value" not in repr(DirectionsSettings(api_key="secret-value"))


def test_factory_builds_google_gateway_and_warns_without_key(caplog):
    gateway = build_directions_gateway(DirectionsSettings())

    assert isinstance(gateway, GoogleDirectionsGateway)
    assert describe_gateway(gateway) == {"gateway": "GoogleDirectionsGateway", "configured": False}
    assert "GOOGLE_MAPS_SERVER_API_KEY is not set" in caplog.text


def test_factory_fixture_requires_file():
    with pytest.raises(ToolError):
        build_directions_gateway(DirectionsSettings(provider="fixture"))


def test_context_uses_fixture_file(monkeypatch, tmp_path):
    fixture = tmp_path / "routes.json"
    fixture.write_text(json.dumps({"routes": {"walk": {"distance_km": 1.2, "eta_minutes": 15}}}), encoding="utf-8")
    monkeypatch.setenv("DIRECTIONS_PROVIDER", "fixture")
    monkeypatch.setenv("DIRECTIONS_FIXTURE_FILE", str(fixture))

    ctx = make_commute_context()

    assert isinstance(ctx.gateway, FixtureDirectionsGateway)
    assert ctx.gateway.is_configured()
    lookup = ctx.gateway.fetch_route("A", "B", CommuteMode.WALK)
    assert lookup.route.eta_minutes == 15
    assert not ctx.gateway.fetch_route("A", "B", CommuteMode.CAR).available
