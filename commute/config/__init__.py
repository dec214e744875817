"""Runtime configuration helpers."""

from commute.config.settings import DirectionsSettings, resolve_directions_settings

__all__ = [
    "DirectionsSettings",
    "resolve_directions_settings",
]
