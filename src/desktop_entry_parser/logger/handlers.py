"""Handler creation for the desktop-entry-parser logger.

Handlers are attached only to the package root logger, behind a
QueueHandler/QueueListener pair, so emitting a record never blocks on
console or file I/O.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from desktop_entry_parser.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_FILE_NAME,
    LOG_ROTATION_THRESHOLD_BYTES,
    ROOT_LOGGER_NAME,
)
from desktop_entry_parser.logger.formatters import HybridConsoleFormatter

if TYPE_CHECKING:
    from desktop_entry_parser.logger.state import LoggerState


class ConfigurationError(Exception):
    """Error in logging configuration."""


def create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create the console handler.

    Records go to stderr so that command output on stdout stays parseable.

    Args:
        console_level: Log level name for the console

    Returns:
        Configured StreamHandler

    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.WARNING))
    return console_handler


def create_file_handler(log_dir: Path, file_level: str) -> RotatingFileHandler:
    """Create a rotating file handler inside ``log_dir``.

    An existing log file already past the rotation threshold is rolled
    over immediately.

    Args:
        log_dir: Directory that holds the log file
        file_level: Log level name for the file

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If the directory or file cannot be created

    """
    log_file = log_dir / LOG_FILE_NAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
        )
        file_handler.setLevel(getattr(logging, file_level, logging.INFO))

        if log_file.stat().st_size >= LOG_ROTATION_THRESHOLD_BYTES:
            file_handler.doRollover()
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e
    return file_handler


def start_listener(
    state: "LoggerState", handlers: list[logging.Handler]
) -> None:
    """Start a new QueueListener over ``handlers`` and record it on state.

    Args:
        state: Logger state object
        handlers: Handlers that will receive queued records

    """
    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()


def setup_root_logger(
    state: "LoggerState",
    console_level: str,
    file_level: str,
    log_dir: Path | None,
) -> None:
    """Initialize the package root logger.

    Called once per process (or after clear_logger_state()).

    Args:
        state: Logger state object
        console_level: Console log level name
        file_level: File log level name
        log_dir: Directory for the log file, None disables file logging

    Raises:
        ConfigurationError: If file handler setup fails

    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Filtering happens at handlers
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = [create_console_handler(console_level)]
    if log_dir is not None:
        handlers.append(create_file_handler(log_dir, file_level))

    start_listener(state, handlers)
    root_logger.addHandler(QueueHandler(state.log_queue))

    state.root_initialized = True
