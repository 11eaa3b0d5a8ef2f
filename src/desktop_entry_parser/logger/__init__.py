"""Logging utilities for desktop-entry-parser.

Structured logging built on the standard library:
- Hybrid console output (plain INFO, coloured WARNING and above) on stderr
- Optional rotating log file
- QueueHandler/QueueListener so emitting never blocks on handler I/O
- Handlers only on the package root logger; children propagate

Usage:
    >>> from desktop_entry_parser.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed %s", path)  # %-style, never f-strings

Environment Variables:
    DESKTOP_ENTRY_PARSER_LOG_DIR: enable file logging into this directory
"""

from typing import TYPE_CHECKING

from desktop_entry_parser.logger.config import (
    update_logger_from_config as _update_config,
)
from desktop_entry_parser.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from desktop_entry_parser.logger.handlers import ConfigurationError
from desktop_entry_parser.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from desktop_entry_parser.logger.state import get_state

if TYPE_CHECKING:
    from desktop_entry_parser.config import Settings

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(settings: "Settings | None" = None) -> None:
    """Apply settings file log levels (and log directory) to the logger.

    Args:
        settings: Pre-loaded Settings; read from disk when omitted

    """
    _update_config(get_state(), settings)
