"""Defaults for evaluation, sampling and logging.

Values can be overridden per call through keyword arguments; the worker
count and log level also read environment variables:

``SDFCAT_WORKERS``
    Number of threads used by :func:`sdfcat.evaluate` (integer >= 1).
``SDFCAT_LOG_LEVEL``
    Logging level name for the command line (``DEBUG``, ``INFO``, ...).
"""

from __future__ import annotations

import logging
import os

from .errors import InvalidParameterError

DEFAULT_TIME = 0.0
DEFAULT_SEED = 12345
DEFAULT_RESOLUTION = 32
DEFAULT_BOUNDS = (-1.0, 1.0)

#: Rows per work item handed to a thread.
DEFAULT_CHUNK_SIZE = 65536
MAX_DEFAULT_WORKERS = 8

WORKERS_ENV = "SDFCAT_WORKERS"
LOG_LEVEL_ENV = "SDFCAT_LOG_LEVEL"


def default_workers() -> int:
    """Thread count from ``SDFCAT_WORKERS``, else ``min(8, cpu_count)``."""
    raw = os.environ.get(WORKERS_ENV)
    if raw is None or raw.strip() == "":
        return max(1, min(MAX_DEFAULT_WORKERS, os.cpu_count() or 1))
    try:
        n = int(raw)
    except ValueError:
        raise InvalidParameterError(f"{WORKERS_ENV} must be an integer, got {raw!r}") from None
    if n < 1:
        raise InvalidParameterError(f"{WORKERS_ENV} must be >= 1, got {n}")
    return n


def default_log_level() -> int:
    """Level from ``SDFCAT_LOG_LEVEL``, else ``logging.INFO``."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise InvalidParameterError(f"{LOG_LEVEL_ENV}: unknown level {raw!r}")
    return level
