"""Structured logging: JSON lines with secret scrubbing."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional

from commute.security.key_manager import get_key_manager


class StructuredLogger:
    """Emits one JSON object per line and scrubs known secrets."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _scrub(self, text: str) -> str:
        return get_key_manager().scrub_text(text)

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(self._scrub(line) + "\n")
            self._output.flush()
        except (OSError, ValueError) as exc:
            # Last-resort fallback to avoid silent logger failures.
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
            sys.stderr.flush()

    def with_trace(self, trace_id: Optional[str] = None) -> StructuredLogger:
        """Same sink, fresh trace id."""
        return StructuredLogger(trace_id=trace_id, output=self._output)

    def stage_start(self, stage: str, **extra: Any) -> None:
        self._timers[stage] = time.time()
        self._emit({"event": "stage_start", "stage": stage, **extra})

    def stage_end(self, stage: str, **extra: Any) -> None:
        start = self._timers.pop(stage, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({"event": "stage_end", "stage": stage, "duration_ms": duration_ms, **extra})

    def lookup(self, mode: str, *, available: bool, **extra: Any) -> None:
        self._emit({"event": "lookup", "mode": mode, "available": available, **extra})

    def error(self, stage: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "stage": stage, "error": self._scrub(error), **extra})

    def warning(self, stage: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "stage": stage, "message": self._scrub(message), **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger
