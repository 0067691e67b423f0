"""Main logger module providing public API functions.

- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get or create logger instance
- set_console_level(): Adjust console verbosity (used by --verbose)
- flush_all_handlers(): Ensure all pending log records are written
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import contextlib
import logging
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

from multisum.logger.config import load_log_settings
from multisum.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from multisum.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits for the queue to drain, then flushes each handler's buffer.
    """
    state = get_state()
    if state.queue_listener is not None and state.log_queue is not None:
        # QueueListener doesn't use task_done(), so poll the queue
        timeout = 5.0
        start_time = time.time()
        while not state.log_queue.empty():
            if time.time() - start_time > timeout:
                break
            time.sleep(0.01)

        for handler in state.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on application exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging with the QueueHandler architecture.

    The root "multisum" logger is initialized exactly once; child loggers
    ("multisum.core.verify", ...) propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to attach a rotating file handler

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get or create logger instance.

    This is the recommended way to get a logger in multisum modules:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Digesting %s", path)

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Configured logger instance

    """
    return setup_logging(name=name)


def set_console_level(level: str) -> None:
    """Set the console handler level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    """
    state = get_state()
    if state.queue_listener is None:
        return

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    for handler in state.queue_listener.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, RotatingFileHandler
        ):
            handler.setLevel(numeric_level)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, removes and closes all handlers on
    multisum loggers and resets the state flags.

    Warning:
        This function is intended for testing only.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
