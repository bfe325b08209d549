"""Structured JSON-line logging plus development-only debug helpers."""

from __future__ import annotations

import json
import logging
import sys
import time
import uuid
from typing import Any, Optional

from wandr.config.settings import is_production

_debug_logger = logging.getLogger("wandr.debug")


def debug(message: str, *args: Any) -> None:
    """Log a debug line unless running with WANDR_ENV=production."""
    if not is_production():
        _debug_logger.debug(message, *args)


class StructuredLogger:
    """Emits one JSON object per line, tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except (OSError, ValueError, TypeError) as exc:
            logging.getLogger("wandr").error("structured log write failed: %s", exc)

    def step_start(self, step: str, **extra: Any) -> None:
        self._timers[step] = time.time()
        self._emit({"event": "step_start", "step": step, **extra})

    def step_end(self, step: str, **extra: Any) -> None:
        start = self._timers.pop(step, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({"event": "step_end", "step": step, "duration_ms": duration_ms, **extra})

    def error(self, step: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "step": step, "error": error, **extra})


def get_logger(trace_id: Optional[str] = None, output=None) -> StructuredLogger:
    return StructuredLogger(trace_id=trace_id, output=output)


__all__ = ["StructuredLogger", "debug", "get_logger"]
