"""API integration tests."""

from __future__ import annotations

import io

import pytest
from fastapi.testclient import TestClient

import commute.api.main as api_main
from commute.adapters.directions.fixture import FixtureDirectionsGateway
from commute.application.context import CommuteContext
from commute.config.settings import DirectionsSettings
from commute.domain.enums import CommuteMode
from commute.domain.models import RawModeResult
from commute.infrastructure.logging import StructuredLogger

_VALID = {"origin": "Home", "destination": "Office", "date": "2025-12-03", "time": "06:57"}


class _CountingGateway(FixtureDirectionsGateway):
    def __init__(self, routes, *, configured=True):
        super().__init__(routes)
        self._configured = configured

    def is_configured(self) -> bool:
        return self._configured


def _client(gateway) -> TestClient:
    ctx = CommuteContext(
        settings=DirectionsSettings(),
        gateway=gateway,
        logger=StructuredLogger(output=io.StringIO()),
    )
    api_main._context = ctx
    return TestClient(api_main.app)


@pytest.fixture(autouse=True)
def _reset_context():
    yield
    api_main._context = None


def test_health():
    r = TestClient(api_main.app).get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.headers["X-Content-Type-Options"] == "nosniff"


def test_plan_returns_ranked_options():
    gateway = _CountingGateway({
        CommuteMode.CAR: RawModeResult(distance_km=10, eta_minutes=20),
        CommuteMode.BIKE: RawModeResult(distance_km=8, eta_minutes=40),
        CommuteMode.TRANSIT: RawModeResult(distance_km=9, eta_minutes=25),
    })

    r = _client(gateway).post("/api/routes/plan", json=_VALID)

    assert r.status_code == 200
    assert r.json() == {
        "options": [
            {
                "id": "car-0",
                "mode": "CAR",
                "etaMinutes": 20,
                "relativeTimeLabel": "Fastest option",
                "co2Kg": 1.92,
                "co2SavingsPercent": 0,
                "costEstimate": 3.0,
            },
            {
                "id": "transit-1",
                "mode": "TRANSIT",
                "etaMinutes": 25,
                "relativeTimeLabel": "5 min slower than fastest",
                "co2Kg": 0.68,
                "co2SavingsPercent": 65,
                "costEstimate": 2.9,
            },
            {
                "id": "bike-2",
                "mode": "BIKE",
                "etaMinutes": 40,
                "relativeTimeLabel": "20 min slower than fastest",
                "co2Kg": 0.0,
                "co2SavingsPercent": 100,
                "costEstimate": 0.0,
            },
        ]
    }


def test_no_routes_is_a_successful_empty_response():
    r = _client(_CountingGateway({})).post("/api/routes/plan", json=_VALID)

    assert r.status_code == 200
    assert r.json() == {"options": []}


@pytest.mark.parametrize(
    "body",
    [
        {k: v for k, v in _VALID.items() if k != "time"},
        {**_VALID, "origin": "   "},
        {**_VALID, "date": 20251203},
        {**_VALID, "destination": None},
        [],
    ],
)
def test_invalid_request_is_rejected_before_lookups(body):
    gateway = _CountingGateway({})

    r = _client(gateway).post("/api/routes/plan", json=body)

    assert r.status_code == 400
    assert r.json() == {"error": "Missing required fields: origin, destination, date, time"}
    assert gateway.calls == []


def test_malformed_json_is_rejected():
    r = _client(_CountingGateway({})).post(
        "/api/routes/plan",
        content="{not json",
        headers={"content-type": "application/json"},
    )

    assert r.status_code == 400


def test_missing_credentials_are_a_configuration_error():
    gateway = _CountingGateway({}, configured=False)

    r = _client(gateway).post("/api/routes/plan", json=_VALID)

    assert r.status_code == 500
    assert r.json() == {"error": "Server directions API key is not configured"}
    assert gateway.calls == []


def test_unexpected_failure_has_no_partial_output(monkeypatch):
    def _boom(_request, _ctx):
        raise RuntimeError("scoring exploded")

    monkeypatch.setattr(api_main, "plan_commute", _boom)

    r = _client(_CountingGateway({})).post("/api/routes/plan", json=_VALID)

    assert r.status_code == 500
    assert r.json() == {"error": "Unexpected error while planning route"}


def test_default_context_without_key_reports_configuration_error(monkeypatch):
    monkeypatch.setattr(api_main, "_context", None)

    r = TestClient(api_main.app).post("/api/routes/plan", json=_VALID)

    assert r.status_code == 500
    assert r.json()["error"] == "Server directions API key is not configured"


def test_context_build_failure_uses_error_envelope(monkeypatch):
    monkeypatch.setenv("DIRECTIONS_PROVIDER", "fixture")
    monkeypatch.delenv("DIRECTIONS_FIXTURE_FILE", raising=False)

    r = TestClient(api_main.app).post("/api/routes/plan", json=_VALID)

    assert r.status_code == 500
    assert r.json() == {"error": "Unexpected error while planning route"}
    assert api_main._context is None


def test_invalid_request_is_rejected_even_when_context_cannot_be_built(monkeypatch):
    monkeypatch.setenv("DIRECTIONS_PROVIDER", "fixture")
    monkeypatch.delenv("DIRECTIONS_FIXTURE_FILE", raising=False)

    r = TestClient(api_main.app).post("/api/routes/plan", json={"origin": "Home"})

    assert r.status_code == 400
    assert r.json() == {"error": "Missing required fields: origin, destination, date, time"}
