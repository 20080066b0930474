"""Runtime infrastructure for tillscan.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Settings resolution via get_settings(), Settings
- AWS gateways (textract_gateway, rekognition_gateway), the receipt store
  (receipt_storage) and the HTTP server (receipt_server), imported directly
  from their modules

Usage:
    from tillscan.runtime import get_logger, get_settings

    logger = get_logger(__name__)
    settings = get_settings()
    print(settings.data_dir, settings.aws_region)
"""

from tillscan.runtime.config import Settings, get_settings, reset_settings
from tillscan.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Settings
    "get_settings",
    "reset_settings",
    "Settings",
]
