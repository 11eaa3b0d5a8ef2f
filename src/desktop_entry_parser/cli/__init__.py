"""Command-line interface for desktop-entry-parser."""

from desktop_entry_parser.cli.parser import CLIParser
from desktop_entry_parser.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
