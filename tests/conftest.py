"""pytest global fixtures: test environment isolation."""

import pytest

from commute.security.key_manager import GOOGLE_MAPS_KEY_ENV, get_key_manager

_ENV_NAMES = (
    GOOGLE_MAPS_KEY_ENV,
    "DIRECTIONS_PROVIDER",
    "DIRECTIONS_FIXTURE_FILE",
    "DIRECTIONS_API_BASE_URL",
    "DIRECTIONS_TIMEOUT_SECONDS",
    "DIRECTIONS_FANOUT_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def no_real_apis(monkeypatch):
    """Real provider credentials are never visible to tests."""
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    get_key_manager().reload(GOOGLE_MAPS_KEY_ENV)
    yield
    get_key_manager().reload(GOOGLE_MAPS_KEY_ENV)
