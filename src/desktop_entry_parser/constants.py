"""Centralized constants module for desktop-entry-parser.

Constants are organized by logical categories and use typing.Final
annotations to ensure immutability.

Usage:
    from desktop_entry_parser.constants import DESKTOP_ENTRY_GROUP
"""

from typing import Final

# =============================================================================
# Desktop entry format
# =============================================================================

# The only group the typed projection reads
DESKTOP_ENTRY_GROUP: Final[str] = "Desktop Entry"

COMMENT_PREFIX: Final[str] = "#"
GROUP_HEADER_START: Final[str] = "["
GROUP_HEADER_END: Final[str] = "]"
KEY_VALUE_SEPARATOR: Final[str] = "="

# Lines end at "\n"; a "\r" directly before it is dropped
LINE_FEED: Final[str] = "\n"
CARRIAGE_RETURN: Final[str] = "\r"

# Only this exact literal coerces to True
BOOLEAN_TRUE_LITERAL: Final[str] = "true"

# Entry keys shared by every entry type
KEY_TYPE: Final[str] = "Type"
KEY_VERSION: Final[str] = "Version"
KEY_NAME: Final[str] = "Name"
KEY_GENERIC_NAME: Final[str] = "GenericName"
KEY_NO_DISPLAY: Final[str] = "NoDisplay"
KEY_COMMENT: Final[str] = "Comment"
KEY_ICON: Final[str] = "Icon"
KEY_HIDDEN: Final[str] = "Hidden"
KEY_ONLY_SHOW_IN: Final[str] = "OnlyShowIn"
KEY_NOT_SHOW_IN: Final[str] = "NotShowIn"

# Application keys
KEY_TRY_EXEC: Final[str] = "TryExec"
KEY_EXEC: Final[str] = "Exec"
KEY_PATH: Final[str] = "Path"
KEY_TERMINAL: Final[str] = "Terminal"
KEY_ACTIONS: Final[str] = "Actions"
KEY_MIME_TYPE: Final[str] = "MimeType"
KEY_CATEGORIES: Final[str] = "Categories"
KEY_KEYWORDS: Final[str] = "Keywords"
KEY_STARTUP_NOTIFY: Final[str] = "StartupNotify"
KEY_STARTUP_WM_CLASS: Final[str] = "StartupWMClass"
KEY_PREFERS_NON_DEFAULT_GPU: Final[str] = "PrefersNonDefaultGPU"
KEY_SINGLE_MAIN_WINDOW: Final[str] = "SingleMainWindow"

# Link keys
KEY_URL: Final[str] = "URL"

# Encoding used when reading desktop files
DESKTOP_FILE_ENCODING: Final[str] = "utf-8"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
DEFAULT_CONFIG_SUBDIR: Final[str] = "desktop-entry-parser"
ENV_CONFIG_DIR: Final[str] = "DESKTOP_ENTRY_PARSER_CONFIG_DIR"
ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"

SECTION_DEFAULT: Final[str] = "DEFAULT"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_LOG_DIR: Final[str] = "log_dir"
KEY_OUTPUT_FORMAT: Final[str] = "output_format"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_OUTPUT_FORMAT: Final[str] = "text"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)
OUTPUT_FORMATS: Final[tuple[str, ...]] = ("text", "json")

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# Logging Constants
# =============================================================================

ROOT_LOGGER_NAME: Final[str] = "desktop_entry_parser"
ENV_LOG_DIR: Final[str] = "DESKTOP_ENTRY_PARSER_LOG_DIR"
LOG_FILE_NAME: Final[str] = "desktop-entry-parser.log"

# Rotate the log file once it reaches this size (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# CLI Constants
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130
