"""Centralized logging configuration for pathgraph.

All modules obtain loggers through :func:`get_logger`; they inherit handlers
and level from the single ``pathgraph`` package logger. Log records go to
stderr so that command output on stdout stays machine-readable.

The initial level can be set with the ``PATHGRAPH_LOG_LEVEL`` environment
variable (e.g. ``DEBUG``); it defaults to ``WARNING``.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathgraph"
LOG_LEVEL_ENV = "PATHGRAPH_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = logging.WARNING

_root_configured = False


def _level_from_env(default: int) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``pathgraph`` logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level. When None, taken from ``PATHGRAPH_LOG_LEVEL`` or
            ``logging.WARNING``.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _root_configured

    if _root_configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if level is None:
        level = _level_from_env(DEFAULT_LEVEL)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``pathgraph`` hierarchy.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger that inherits level and handlers from the package logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to the default level (``PATHGRAPH_LOG_LEVEL`` or WARNING)."""
    set_global_log_level(_level_from_env(DEFAULT_LEVEL))


def reset_logging() -> None:
    """Drop handlers and forget configuration (mainly for testing)."""
    global _root_configured
    _root_configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
