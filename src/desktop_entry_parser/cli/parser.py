"""CLI argument parser for desktop-entry-parser."""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from desktop_entry_parser.constants import OUTPUT_FORMATS


class CLIParser:
    """Command-line argument parser for desktop-entry-parser."""

    def __init__(self, default_format: str) -> None:
        """Initialize the CLI parser.

        Args:
            default_format: Output format used when --format is not given,
                taken from the settings file.

        """
        self.default_format = default_format

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Parsed arguments namespace

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Build the main parser with all subcommands."""
        parser = argparse.ArgumentParser(
            prog="desktop-entry-parser",
            description="Parse freedesktop.org desktop entry files",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Show the typed entry
  %(prog)s show /usr/share/applications/org.gnome.TextEditor.desktop

  # Dump every group as JSON
  %(prog)s raw --format json firefox.desktop

  # Validate several files
  %(prog)s check ~/.local/share/applications/*.desktop
            """,
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show desktop-entry-parser version and exit",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on the console",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_show_command(subparsers)
        self._add_raw_command(subparsers)
        self._add_check_command(subparsers)
        return parser

    def _add_format_option(self, command_parser) -> None:
        command_parser.add_argument(
            "--format",
            choices=OUTPUT_FORMATS,
            default=self.default_format,
            help=f"Output format (default: {self.default_format})",
        )

    def _add_show_command(self, subparsers) -> None:
        show_parser = subparsers.add_parser(
            "show", help="Show the typed desktop entry of each file"
        )
        show_parser.add_argument("files", nargs="+", help="Desktop files")
        show_parser.add_argument(
            "--all-fields",
            action="store_true",
            help="Include fields that are not set",
        )
        self._add_format_option(show_parser)

    def _add_raw_command(self, subparsers) -> None:
        raw_parser = subparsers.add_parser(
            "raw", help="Show every group and key of each file"
        )
        raw_parser.add_argument("files", nargs="+", help="Desktop files")
        self._add_format_option(raw_parser)

    def _add_check_command(self, subparsers) -> None:
        check_parser = subparsers.add_parser(
            "check", help="Report whether each file parses"
        )
        check_parser.add_argument("files", nargs="+", help="Desktop files")
