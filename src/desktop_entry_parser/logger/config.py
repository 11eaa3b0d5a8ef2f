"""Load and apply logger settings.

Bootstrap values come from constants and the environment only, because the
settings module itself logs through this package. Settings file values are
applied afterwards with update_logger_from_config().
"""

import logging
import os
from logging.handlers import QueueHandler, RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from desktop_entry_parser.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ROOT_LOGGER_NAME,
)
from desktop_entry_parser.logger.handlers import (
    create_file_handler,
    start_listener,
)

if TYPE_CHECKING:
    from desktop_entry_parser.config import Settings
    from desktop_entry_parser.logger.state import LoggerState


def load_log_settings() -> tuple[str, str, Path | None]:
    """Load bootstrap console level, file level, and log directory.

    Environment Variable Override:
        DESKTOP_ENTRY_PARSER_LOG_DIR: enables file logging into the given
        directory. The test suite points it at a temporary directory.

    Returns:
        Tuple of (console_level, file_level, log_dir). log_dir is None
        when file logging is disabled.

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    log_dir = Path(env_log_dir).expanduser() if env_log_dir else None
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_dir


def apply_settings(state: "LoggerState", settings: "Settings") -> None:
    """Apply settings to the running handlers.

    Updates console and file handler levels. When the settings name a log
    directory and no file handler is running yet, the listener is restarted
    with a file handler added.

    Args:
        state: Logger state object
        settings: Loaded settings

    """
    if state.queue_listener is None:
        return

    console_level = getattr(
        logging, settings.console_log_level, logging.WARNING
    )
    file_level = getattr(logging, settings.log_level, logging.INFO)
    for handler in state.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(file_level)
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(console_level)

    if settings.log_dir is not None and state.file_handler is None:
        handlers = [
            *state.handlers,
            create_file_handler(settings.log_dir, settings.log_level),
        ]
        state.stop_listener()
        start_listener(state, handlers)

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            if isinstance(handler, QueueHandler):
                root_logger.removeHandler(handler)
        root_logger.addHandler(QueueHandler(state.log_queue))

    state.config_applied = True


def update_logger_from_config(
    state: "LoggerState", settings: "Settings | None" = None
) -> None:
    """Load the settings file and apply it to the running handlers.

    Args:
        state: Logger state object
        settings: Pre-loaded settings; loaded from disk when omitted

    """
    if settings is None:
        # Late import: the config package logs through this one
        from desktop_entry_parser.config import SettingsManager  # noqa: PLC0415

        settings = SettingsManager().load()

    apply_settings(state, settings)
