"""Directions provider settings resolved from the environment."""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

from commute.security.key_manager import GOOGLE_MAPS_KEY_ENV, KeyManager, get_key_manager

_PROVIDERS = {"google", "fixture"}
DEFAULT_BASE_URL = "https://maps.googleapis.com"


def _env_float(name: str, default: float) -> float:
    raw = str(os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def resolve_directions_provider() -> str:
    mode = str(os.getenv("DIRECTIONS_PROVIDER") or "").strip().lower()
    return mode if mode in _PROVIDERS else "google"


class DirectionsSettings(BaseModel):
    provider: str = Field(default="google")
    api_key: Optional[str] = Field(default=None, repr=False)
    api_key_env: str = Field(default=GOOGLE_MAPS_KEY_ENV)
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout_seconds: float = Field(default=10.0, gt=0)
    fanout_timeout_seconds: float = Field(default=15.0, gt=0)
    fixture_file: Optional[str] = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


def resolve_directions_settings(key_manager: KeyManager | None = None) -> DirectionsSettings:
    km = key_manager or get_key_manager()
    base_url = str(os.getenv("DIRECTIONS_API_BASE_URL") or "").strip().rstrip("/")
    fixture_file = str(os.getenv("DIRECTIONS_FIXTURE_FILE") or "").strip()
    return DirectionsSettings(
        provider=resolve_directions_provider(),
        api_key=km.get(GOOGLE_MAPS_KEY_ENV) or None,
        base_url=base_url or DEFAULT_BASE_URL,
        timeout_seconds=_env_float("DIRECTIONS_TIMEOUT_SECONDS", 10.0),
        fanout_timeout_seconds=_env_float("DIRECTIONS_FANOUT_TIMEOUT_SECONDS", 15.0),
        fixture_file=fixture_file or None,
    )


__all__ = [
    "DEFAULT_BASE_URL",
    "DirectionsSettings",
    "resolve_directions_provider",
    "resolve_directions_settings",
]
