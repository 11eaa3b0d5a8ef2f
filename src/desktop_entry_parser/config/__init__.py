"""Configuration management.

- Settings / SettingsManager: optional INI settings file (settings.py)
- Paths: configuration path resolution (paths.py)
"""

from desktop_entry_parser.config.paths import Paths
from desktop_entry_parser.config.settings import Settings, SettingsManager

__all__ = ["Paths", "Settings", "SettingsManager"]
