"""Logging utilities for multisum.

This package provides structured logging with:
- Colored console output on stderr (stdout carries checksum output only)
- Optional file rotation using RotatingFileHandler
- QueueHandler/QueueListener dispatch from a single root logger
- Hierarchical logger naming (e.g., multisum.core.verify)

Usage:
    >>> from multisum.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Checked %d files", count)  # Use %-style formatting

Rules for contributors:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from multisum.logger.config import (
    update_logger_from_config as _update_config,
)
from multisum.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from multisum.logger.handlers import ConfigurationError
from multisum.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from multisum.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config) -> None:
    """Apply log levels and file logging from loaded settings.

    Args:
        config: GlobalConfig returned by ConfigManager.load_global_config()

    """
    _update_config(get_state(), config)
