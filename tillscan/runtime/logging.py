"""Centralized logging configuration for tillscan.

Usage:
    from tillscan.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Extracted line 3: 'Widget'")
    logger.info("Receipt saved with id 7")

Environment variables:
    TILLSCAN_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR). Default: INFO
"""

import logging
import os
import sys

LOGGER_NAMESPACE = "tillscan"

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_logging_configured = False


def _resolve_level(level: int | str | None) -> int:
    """Map an explicit level, a level name, or the environment to a logging level."""
    if isinstance(level, int):
        return level
    if level is None:
        level = os.environ.get("TILLSCAN_LOG_LEVEL", "")
    return _LEVEL_NAMES.get(level.strip().upper(), DEFAULT_LOG_LEVEL)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | str | None = None) -> None:
    """Configure the tillscan logger namespace once per process.

    Args:
        level: Log level or level name. If None, reads TILLSCAN_LOG_LEVEL
               or uses DEFAULT_LOG_LEVEL.
    """
    global _logging_configured

    if _logging_configured:
        return

    resolved = _resolve_level(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter_for(resolved))

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(resolved)
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Module names already inside the package (``tillscan.runtime.x``) are used
    as-is; anything else is nested under the tillscan namespace.
    """
    configure_logging()

    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int | str) -> None:
    """Change the log level at runtime, switching format to/from DEBUG."""
    resolved = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(resolved)
    for handler in logger.handlers:
        handler.setFormatter(_formatter_for(resolved))
