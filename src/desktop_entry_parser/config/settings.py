"""INI settings for desktop-entry-parser.

The settings file is optional. Missing keys and invalid values fall back to
defaults, and the file is only written when save() is called.
"""

import configparser
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from desktop_entry_parser.config.paths import Paths
from desktop_entry_parser.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    ISO_DATETIME_FORMAT,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_DIR,
    KEY_LOG_LEVEL,
    KEY_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    SECTION_DEFAULT,
    VALID_LOG_LEVELS,
)
from desktop_entry_parser.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved settings values."""

    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    log_dir: Path | None = None
    output_format: str = DEFAULT_OUTPUT_FORMAT


KEY_COMMENTS: dict[str, str] = {
    KEY_LOG_LEVEL: "# Log file detail level (DEBUG, INFO, WARNING, ERROR)",
    KEY_CONSOLE_LOG_LEVEL: "# Console detail level (DEBUG, INFO, WARNING)",
    KEY_LOG_DIR: "# Log file directory, empty disables file logging",
    KEY_OUTPUT_FORMAT: "# Default CLI output format (text, json)",
}


def _file_header() -> str:
    """Build the comment header written at the top of the settings file."""
    timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
    return (
        "# desktop-entry-parser configuration\n"
        f"# Last updated: {timestamp}\n\n"
    )


class SettingsManager:
    """Loads and saves the INI settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory
                (defaults to Paths.config_dir())

        """
        self.config_dir = config_dir or Paths.config_dir()
        self.settings_file = Paths.settings_file(self.config_dir)

    def load(self) -> Settings:
        """Load settings, falling back to defaults where needed.

        Returns:
            Resolved settings

        """
        if not self.settings_file.exists():
            logger.debug("No settings file at %s", self.settings_file)
            return Settings()

        parser = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        try:
            parser.read(self.settings_file, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            logger.warning(
                "Ignoring unreadable settings file %s: %s",
                self.settings_file,
                e,
            )
            return Settings()

        section = parser[SECTION_DEFAULT]
        log_dir_value = section.get(KEY_LOG_DIR, "").strip()

        return Settings(
            log_level=self._choice(
                section,
                KEY_LOG_LEVEL,
                VALID_LOG_LEVELS,
                DEFAULT_LOG_LEVEL,
                str.upper,
            ),
            console_log_level=self._choice(
                section,
                KEY_CONSOLE_LOG_LEVEL,
                VALID_LOG_LEVELS,
                DEFAULT_CONSOLE_LOG_LEVEL,
                str.upper,
            ),
            log_dir=(
                Paths.expand_path(log_dir_value) if log_dir_value else None
            ),
            output_format=self._choice(
                section,
                KEY_OUTPUT_FORMAT,
                OUTPUT_FORMATS,
                DEFAULT_OUTPUT_FORMAT,
                str.lower,
            ),
        )

    def _choice(
        self,
        section: configparser.SectionProxy,
        key: str,
        allowed: tuple[str, ...],
        default: str,
        normalize: Callable[[str], str],
    ) -> str:
        """Read a value restricted to ``allowed`` after normalizing case."""
        raw_value = section.get(key, "").strip()
        if not raw_value:
            return default

        normalized = normalize(raw_value)
        if normalized in allowed:
            return normalized

        logger.warning(
            "Invalid value %r for %s in %s, using %s",
            raw_value,
            key,
            self.settings_file,
            default,
        )
        return default

    def save(self, settings: Settings) -> None:
        """Write settings with explanatory comments.

        Args:
            settings: Settings to persist

        """
        values = {
            KEY_LOG_LEVEL: settings.log_level,
            KEY_CONSOLE_LOG_LEVEL: settings.console_log_level,
            KEY_LOG_DIR: str(settings.log_dir) if settings.log_dir else "",
            KEY_OUTPUT_FORMAT: settings.output_format,
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(_file_header())
            f.write(f"[{SECTION_DEFAULT}]\n")
            for key, value in values.items():
                f.write(f"{KEY_COMMENTS[key]}\n")
                f.write(f"{key} = {value}\n")

        logger.debug("Saved settings to %s", self.settings_file)
