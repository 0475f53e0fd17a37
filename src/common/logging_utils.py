"""Centralized logging helpers.

Provides root logger configuration plus small utilities used across modules
for structured DEBUG traces: ``extra_context`` builds the ``extra=`` mapping,
``is_debug_enabled`` guards costly trace construction, and ``Timer`` measures
durations.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from constants import Constants

_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()) | {"message", "asctime"}


def configure_logging(level: Optional[str] = None) -> None:
    """Install a single root handler using the project log format.

    The level comes from ``level`` when given, else from the
    PAKETRESOLVE_LOG_LEVEL environment variable, else INFO. Calling this
    more than once replaces the previously installed handler.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_paketresolve", False):
            root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    handler._paketresolve = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records.

    None values are dropped. Keys that would clash with LogRecord attributes
    are prefixed with ``ctx_``.
    """
    ctx: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        ctx[f"ctx_{key}" if key in _RESERVED else key] = value
    return ctx


class Timer:
    """Context manager measuring elapsed wall time."""

    def __init__(self):
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> float:
        """Elapsed milliseconds, up to now if the block is still running."""
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000.0, 3)
