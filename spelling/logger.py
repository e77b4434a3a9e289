"""
Centralized logging for the spelling package.

Uses Python's standard ``logging`` module. The package root logger is
``spelling``; it does not propagate and carries a ``NullHandler`` so the
library stays quiet unless asked otherwise.

Default log level is **WARNING**. Call :func:`configure_file_logging` to get
a ``RotatingFileHandler`` so that log files never grow without bound:
    ``<path>`` (rotated to .1, .2, … up to ``BACKUP_COUNT`` backups)
"""

from __future__ import annotations

import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 1 * 1024 * 1024  # 1 MB per file
BACKUP_COUNT = 2  # keep up to 3 files total (current + 2 backups)
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Root logger name for the entire package.  Every module should call
#     logger = get_logger(__name__)
# which produces loggers like ``spelling.distance``, ``spelling.parallel``.
_ROOT_LOGGER_NAME = "spelling"

# Singleton state
_initialized = False
_file_handler: Optional[RotatingFileHandler] = None
_lock = threading.Lock()


def _setup_root_logger(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Configure the root package logger (idempotent)."""
    global _initialized

    root = logging.getLogger(_ROOT_LOGGER_NAME)

    with _lock:
        if _initialized:
            return root

        root.setLevel(_resolve_level(level))
        root.propagate = False
        root.addHandler(logging.NullHandler())

        _initialized = True
    return root


def _resolve_level(level: Optional[str]) -> int:
    """Convert a level name to a ``logging`` constant, defaulting to WARNING."""
    name = (level or DEFAULT_LOG_LEVEL).upper().strip()
    if name not in VALID_LEVELS:
        return logging.WARNING
    return getattr(logging, name)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger for the given module name.

    Typical usage at the top of each module::

        from .logger import get_logger
        logger = get_logger(__name__)
    """
    _setup_root_logger()  # idempotent
    if name and name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(_ROOT_LOGGER_NAME)


def set_log_level(level: str) -> None:
    """Change the effective log level for the entire package at runtime.

    A no-op when the package is already at *level*.
    """
    root = _setup_root_logger(level)
    resolved = _resolve_level(level)
    with _lock:
        if root.level == resolved:
            return
        root.setLevel(resolved)
    root.info("Log level changed to %s", logging.getLevelName(resolved))


def configure_file_logging(path: Union[str, Path, None]) -> Optional[RotatingFileHandler]:
    """Send package logs to a rotating file at *path*.

    Replaces a previously configured file handler; keeps it when it already
    writes to *path*. ``None`` detaches it. Returns the attached handler, or
    ``None`` when the file cannot be opened (logging then silently degrades
    to the ``NullHandler``).
    """
    global _file_handler

    root = _setup_root_logger()
    with _lock:
        if path and _file_handler is not None:
            if _file_handler.baseFilename == os.path.abspath(str(path)):
                return _file_handler
        if _file_handler is not None:
            root.removeHandler(_file_handler)
            _file_handler.close()
            _file_handler = None
        if not path:
            return None

        log_path = Path(path)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                str(log_path),
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError:
            return None
        fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(fh)
        _file_handler = fh
        return fh


def apply_logging_config(cfg: dict) -> None:
    """Apply ``log_level``/``log_file`` from a config dict.

    Only touches the loggers when a setting actually differs from the
    current one, so it is safe to call for every request.
    """
    set_log_level(cfg.get("log_level"))
    if cfg.get("log_file"):
        configure_file_logging(cfg["log_file"])
