"""Central API key manager.

Responsibilities:
  1. Read and cache every provider credential in one place
  2. Scrub known key values out of logs and exception messages
  3. Reload keys from the environment (rotation)

External API callers obtain keys through this module rather than os.getenv.
"""

from __future__ import annotations

import os
from typing import Optional

from commute.security.redact import redact_sensitive
from commute.shared.exceptions import KeyMissingError

GOOGLE_MAPS_KEY_ENV = "GOOGLE_MAPS_SERVER_API_KEY"


class KeyManager:
    """Process-wide key manager."""

    def __init__(self):
        self._keys: dict[str, str] = {}

    def get(self, name: str, *, required: bool = False) -> Optional[str]:
        """
        Return the key called ``name``.
        Cached values win; otherwise the environment is consulted.
        Blank values count as missing.
        """
        value = self._keys.get(name)
        if value is None:
            raw = os.getenv(name, "").strip()
            if raw:
                self._keys[name] = value = raw
            elif required:
                raise KeyMissingError(name)
        return value

    def scrub_text(self, text: str) -> str:
        """Erase every known key value from ``text``, then apply pattern redaction."""
        result = str(text) if text is not None else ""
        for name, value in self._keys.items():
            if value in result:
                result = result.replace(value, f"[{name}:***REDACTED***]")
        return redact_sensitive(result)

    def reload(self, name: str) -> None:
        """Force a reload of ``name`` from the environment."""
        raw = os.getenv(name, "").strip()
        if raw:
            self._keys[name] = raw
        else:
            self._keys.pop(name, None)


_manager: Optional[KeyManager] = None


def get_key_manager() -> KeyManager:
    global _manager
    if _manager is None:
        _manager = KeyManager()
    return _manager
