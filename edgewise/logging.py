"""Logging utilities for edgewise.

Every module logs through a child of the ``edgewise`` package logger. Only
that package logger carries a handler; children have no level of their own
and propagate to it, so one call to set_log_level or configure_logging
governs the whole library, including modules imported later.

The initial level is WARNING and can be overridden with the
``EDGEWISE_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_PACKAGE = "edgewise"
_LOG_LEVEL_ENV_VAR = "EDGEWISE_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _parse_level(level: int | str) -> int:
    """Return a numeric level; unknown level names raise ValueError."""
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level {level!r}")
        return value
    return level


def _install_handler(logger: logging.Logger, stream, format_string: Optional[str]) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    logger.addHandler(handler)


def _env_level() -> int:
    try:
        return _parse_level(os.getenv(_LOG_LEVEL_ENV_VAR, "WARNING"))
    except ValueError:
        return logging.WARNING


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(_PACKAGE)
    if not logger.handlers:
        logger.setLevel(_env_level())
        _install_handler(logger, sys.stderr, None)
        logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the logger for a module.

    Names outside the ``edgewise`` namespace are moved under it, so
    ``get_logger("reports")`` is ``edgewise.reports``. Child loggers never
    get handlers of their own.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Example:
        >>> from edgewise.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxed %d edges", 12)
    """
    package = _package_logger()
    if name is None or name == _PACKAGE:
        return package
    if not name.startswith(_PACKAGE + "."):
        name = f"{_PACKAGE}.{name}"
    return logging.getLogger(name)


def get_log_level() -> int:
    """Return the level of the package logger."""
    return _package_logger().level


def set_log_level(level: int | str) -> None:
    """Set the logging level for the whole library.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').

    Raises:
        ValueError: If a level name is not recognised.
    """
    _package_logger().setLevel(_parse_level(level))


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the package handler and set the level.

    It should typically be called once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> from edgewise.logging import configure_logging
        >>> configure_logging(level="DEBUG")
    """
    logger = _package_logger()
    logger.setLevel(_parse_level(level))
    _install_handler(logger, stream if stream is not None else sys.stderr, format_string)
