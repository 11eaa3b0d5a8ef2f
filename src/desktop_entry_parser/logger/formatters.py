"""Console formatters for the desktop-entry-parser logger.

- ColoredConsoleFormatter: level names wrapped in ANSI colour codes
- SimpleConsoleFormatter: the bare message
- HybridConsoleFormatter: bare message for INFO, coloured structure otherwise
"""

import logging

from desktop_entry_parser.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that colours the level name of each record."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with a coloured level name.

        The level name is swapped only for the duration of the call so
        other handlers receive the record unchanged.

        Args:
            record: The log record to format

        Returns:
            Formatted log line

        """
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{color}{original_levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class SimpleConsoleFormatter(logging.Formatter):
    """Formatter that outputs only the message."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the interpolated message of the record."""
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Plain INFO lines, coloured structured lines for every other level.

    Example Output:
        INFO:     "Parsed 3 desktop entries"
        WARNING:  "12:30:45 - desktop_entry_parser - WARNING - Bad level"

    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize with the structured format used for non-INFO records.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Pick the simple or structured format by record level."""
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)
