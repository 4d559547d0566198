from __future__ import annotations

from .config import LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from .handlers import _HANDLER_TAG_ATTR, ColorFormatter

__all__ = [
    "LoggingConfig",
    "ColorFormatter",
    "configure_logging",
    "get_logger",
    "shutdown_logging",
]
