"""CLI runner for desktop-entry-parser.

Routes parsed arguments to the command handlers and turns their outcome
into an exit status.
"""

import sys
from argparse import Namespace
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any

import orjson

from desktop_entry_parser import (
    __version__,
    parse_desktop_entry,
    parse_desktop_entry_raw,
)
from desktop_entry_parser.cli.output import (
    format_entry,
    format_file_header,
    format_raw,
)
from desktop_entry_parser.cli.parser import CLIParser
from desktop_entry_parser.config import SettingsManager
from desktop_entry_parser.constants import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
)
from desktop_entry_parser.core import dumps_entry, dumps_raw, entry_to_dict
from desktop_entry_parser.exceptions import DesktopEntryError
from desktop_entry_parser.logger import get_logger, update_logger_from_config

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner."""

    def __init__(
        self, settings_manager: SettingsManager | None = None
    ) -> None:
        """Initialize the runner and load settings.

        Args:
            settings_manager: Settings source (defaults to the user's
                settings file)

        """
        self.settings_manager = settings_manager or SettingsManager()
        self.settings = self.settings_manager.load()
        self.command_handlers: dict[str, Callable[[Namespace], int]] = {
            "show": self._handle_show,
            "raw": self._handle_raw,
            "check": self._handle_check,
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and run the selected command.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Process exit status

        """
        args = CLIParser(self.settings.output_format).parse_args(argv)

        settings = self.settings
        if args.verbose:
            settings = replace(settings, console_log_level="DEBUG")
        update_logger_from_config(settings)

        if args.version:
            print(__version__)
            return EXIT_SUCCESS

        if not args.command:
            print("No command specified. Use --help.", file=sys.stderr)
            return EXIT_FAILURE

        logger.debug(
            "Running %s on %d file(s)", args.command, len(args.files)
        )
        try:
            return self.command_handlers[args.command](args)
        except KeyboardInterrupt:
            print("\nOperation cancelled by user", file=sys.stderr)
            return EXIT_INTERRUPTED

    def _parse_files(
        self, files: Sequence[str], parse: Callable[[str], Any]
    ) -> tuple[dict[str, Any], bool]:
        """Parse each file, reporting failures on stderr.

        Returns:
            Tuple of (path -> parsed result for successes, any_failed)

        """
        results: dict[str, Any] = {}
        failed = False
        for path in files:
            try:
                results[path] = parse(path)
            except DesktopEntryError as e:
                logger.info("Failed to parse %s: %s", path, e)
                print(f"Error: {e}", file=sys.stderr)
                failed = True
        return results, failed

    def _print_text(
        self, results: dict[str, Any], render: Callable[[Any], str]
    ) -> None:
        show_headers = len(results) > 1
        for index, (path, result) in enumerate(results.items()):
            if index:
                print()
            if show_headers:
                print(format_file_header(path))
            print(render(result))

    def _handle_show(self, args: Namespace) -> int:
        results, failed = self._parse_files(args.files, parse_desktop_entry)

        if args.format == "json":
            if len(args.files) == 1 and results:
                (entry,) = results.values()
                output = dumps_entry(entry, include_unset=args.all_fields)
                print(output.decode())
            elif results:
                payload = {
                    path: entry_to_dict(entry, include_unset=args.all_fields)
                    for path, entry in results.items()
                }
                output = orjson.dumps(payload, option=orjson.OPT_INDENT_2)
                print(output.decode())
        else:
            self._print_text(
                results,
                lambda entry: format_entry(
                    entry, include_unset=args.all_fields
                ),
            )

        return EXIT_FAILURE if failed else EXIT_SUCCESS

    def _handle_raw(self, args: Namespace) -> int:
        results, failed = self._parse_files(
            args.files, parse_desktop_entry_raw
        )

        if args.format == "json":
            if len(args.files) == 1 and results:
                (raw,) = results.values()
                print(dumps_raw(raw).decode())
            elif results:
                print(
                    orjson.dumps(
                        results,
                        option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS,
                    ).decode()
                )
        else:
            self._print_text(results, format_raw)

        return EXIT_FAILURE if failed else EXIT_SUCCESS

    def _handle_check(self, args: Namespace) -> int:
        failed = False
        for path in args.files:
            try:
                entry = parse_desktop_entry(path)
            except DesktopEntryError as e:
                print(f"FAIL {path}: {e.message}")
                logger.info("Check failed for %s: %s", path, e)
                failed = True
            else:
                print(f"OK   {path} ({entry.entry_type.value})")

        return EXIT_FAILURE if failed else EXIT_SUCCESS
