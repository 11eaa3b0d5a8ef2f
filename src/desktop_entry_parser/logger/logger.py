"""Public logging API.

- setup_logging(): configure the package root logger once
- get_logger(): module logger, configuring the root on first use
- flush_all_handlers(): drain the queue so records reach their handlers
- clear_logger_state(): reset everything, for tests
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from desktop_entry_parser.constants import ROOT_LOGGER_NAME
from desktop_entry_parser.logger.config import load_log_settings
from desktop_entry_parser.logger.handlers import setup_root_logger
from desktop_entry_parser.logger.state import get_state

_FLUSH_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Wait for queued records to be processed, then flush every handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    deadline = time.monotonic() + _FLUSH_TIMEOUT_SECONDS
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)
    # The listener may still hold the last dequeued record
    time.sleep(0.05)

    for handler in state.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the queue listener at interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.stop_listener()


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configure the root logger once and return the named logger.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level name (default from bootstrap)
        file_level: File log level name (default from bootstrap)
        log_dir: Log directory; falls back to DESKTOP_ENTRY_PARSER_LOG_DIR

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_dir = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_dir or cfg_dir,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger, configuring the package root logger on first use.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Opened group %s", group)

    Args:
        name: Logger name, typically __name__

    Returns:
        Logger instance

    """
    return setup_logging(name=name)


def clear_logger_state() -> None:
    """Reset logging to an unconfigured state.

    Stops the queue listener and detaches handlers from package loggers.
    Logger objects are kept so module-level ``logger`` references stay
    valid; the next get_logger() call configures the root again.
    Intended for tests only.
    """
    state = get_state()
    with state.lock:
        flush_all_handlers()
        state.reset()

        for logger_name in list(logging.Logger.manager.loggerDict):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
