"""Path utilities for desktop-entry-parser configuration.

Paths are resolved on each call so environment overrides set after import
(for example by tests) are honoured.
"""

import os
from pathlib import Path

from desktop_entry_parser.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
    ENV_XDG_CONFIG_HOME,
)


class Paths:
    """Application configuration paths."""

    @classmethod
    def config_dir(cls) -> Path:
        """Get the configuration directory.

        Resolution order: DESKTOP_ENTRY_PARSER_CONFIG_DIR, then
        $XDG_CONFIG_HOME/desktop-entry-parser, then
        ~/.config/desktop-entry-parser.

        Returns:
            Configuration directory path (may not exist)
        """
        override = os.getenv(ENV_CONFIG_DIR)
        if override:
            return cls.expand_path(override)

        xdg_config_home = os.getenv(ENV_XDG_CONFIG_HOME)
        base = (
            cls.expand_path(xdg_config_home)
            if xdg_config_home
            else Path.home() / ".config"
        )
        return base / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def settings_file(cls, config_dir: Path | None = None) -> Path:
        """Get the settings file path.

        Args:
            config_dir: Configuration directory (defaults to config_dir())

        Returns:
            Path to settings.conf
        """
        return (config_dir or cls.config_dir()) / CONFIG_FILE_NAME

    @staticmethod
    def expand_path(path_str: str) -> Path:
        """Expand ~ and make the path absolute.

        Args:
            path_str: Path string from the environment or settings file

        Returns:
            Absolute path
        """
        return Path(path_str).expanduser().absolute()
