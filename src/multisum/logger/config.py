"""Configuration loading and updating for the logging system.

The logger is bootstrapped with hardcoded defaults at import time, then
update_logger_from_config() applies the values from settings.conf once the
configuration manager has loaded them.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from multisum.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
)
from multisum.logger.handlers import create_file_handler, start_listener

if TYPE_CHECKING:
    from multisum.config import GlobalConfig
    from multisum.logger.state import _LoggerState


def default_log_file() -> Path:
    """Return the log file path, honouring the MULTISUM_LOG_DIR override.

    When set: Logs are written to $MULTISUM_LOG_DIR/multisum.log
    When not set: Logs go to ~/.config/multisum/logs/multisum.log
    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser() / LOG_FILE_NAME
    return (
        Path.home()
        / CONFIG_DIR_NAME
        / DEFAULT_CONFIG_SUBDIR
        / "logs"
        / LOG_FILE_NAME
    )


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Returns hardcoded defaults to avoid circular imports during module init.
    Call update_logger_from_config() after initialization to use config values.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, default_log_file()


def update_logger_from_config(
    state: "_LoggerState", config: "GlobalConfig"
) -> None:
    """Update logger handler levels from loaded settings.

    Handler levels are updated in place. When ``log_to_file`` is enabled
    and no file handler is running yet, the listener is restarted with an
    additional rotating file handler.

    Args:
        state: Logger state object (from logger.state module)
        config: Loaded global configuration

    """
    console_level = getattr(logging, config["console_log_level"], logging.WARNING)
    file_level = getattr(logging, config["log_level"], logging.INFO)

    if state.queue_listener is None:
        return

    handlers = list(state.queue_listener.handlers)
    has_file_handler = False
    for handler in handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(file_level)
            has_file_handler = True
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(console_level)

    if config["log_to_file"] and not has_file_handler:
        handlers.append(
            create_file_handler(default_log_file(), config["log_level"])
        )
        start_listener(state, handlers)

    state.config_applied = True
