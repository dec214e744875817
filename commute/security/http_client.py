"""Secure HTTP client, the single egress point for external API calls.

Responsibilities:
  1. Scrub API keys out of exception messages
  2. Apply one timeout policy; a failed call is reported, never retried
  3. Keep httpx behind a small surface
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from commute.security.key_manager import KeyManager, get_key_manager
from commute.shared.exceptions import ToolError, ToolTimeoutError


class SecureHttpClient:
    """Wraps httpx; every failure surfaces as a scrubbed ToolError."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        tool_name: str = "http",
        client: Optional[httpx.Client] = None,
        key_manager: Optional[KeyManager] = None,
    ):
        self._timeout = timeout
        self._tool_name = tool_name
        self._client = client
        self._km = key_manager or get_key_manager()

    def _send(self, url: str, params: Optional[dict[str, Any]]) -> httpx.Response:
        if self._client is not None:
            return self._client.get(url, params=params, timeout=self._timeout)
        return httpx.get(url, params=params, timeout=self._timeout)

    def get(self, url: str, *, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        GET ``url`` once and return the decoded JSON object.
        Error messages never carry the key.
        """
        try:
            resp = self._send(url, params)
            resp.raise_for_status()
            data = resp.json()
            if not isinstance(data, dict):
                raise ValueError(f"expected JSON object, got {type(data).__name__}")
            return data
        except httpx.HTTPStatusError as e:
            safe_msg = self._km.scrub_text(e.response.text[:200])
            raise ToolError(self._tool_name, f"HTTP {e.response.status_code}: {safe_msg}") from None
        except httpx.TimeoutException:
            raise ToolTimeoutError(self._tool_name, f"timed out after {self._timeout}s") from None
        except httpx.HTTPError as e:
            safe_msg = self._km.scrub_text(str(e))
            raise ToolError(self._tool_name, f"request failed: {safe_msg}") from None
        except ValueError as e:
            safe_msg = self._km.scrub_text(str(e))
            raise ToolError(self._tool_name, f"invalid JSON response: {safe_msg}") from None
