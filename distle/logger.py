"""
Centralized logging for distle.

Uses Python's standard ``logging`` module. Every module calls

    from distle.logger import get_logger
    logger = get_logger(__name__)

which produces loggers like ``distle.engine.constraints``. The ``distle``
root logger only carries a ``NullHandler``: records propagate to whatever
the host application configures, so nothing is printed twice and the
library is quiet when nobody configures logging. Default level is WARNING.
"""

from __future__ import annotations

import logging

DEFAULT_LOG_LEVEL = "WARNING"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ROOT_LOGGER_NAME = "distle"

_initialized = False


def _resolve_level(level: str | None) -> int:
    """Convert a level name to a ``logging`` constant; unknown names raise ValueError."""
    name = (level or DEFAULT_LOG_LEVEL).upper().strip()
    if name not in VALID_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}. Valid: {', '.join(VALID_LEVELS)}")
    return getattr(logging, name)


def _setup_root_logger() -> logging.Logger:
    """Configure the package root logger (idempotent)."""
    global _initialized

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if _initialized:
        return root

    root.setLevel(_resolve_level(DEFAULT_LOG_LEVEL))
    root.addHandler(logging.NullHandler())

    _initialized = True
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child of the ``distle`` logger for the given module name."""
    _setup_root_logger()
    if name and name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(_ROOT_LOGGER_NAME)


def set_log_level(level: str) -> None:
    """Change the effective log level for the whole package at runtime."""
    resolved = _resolve_level(level)
    root = _setup_root_logger()
    root.setLevel(resolved)
    root.debug("Log level changed to %s", logging.getLevelName(resolved))
