"""Main CLI entry point for desktop-entry-parser."""

import sys

from desktop_entry_parser.cli import CLIRunner
from desktop_entry_parser.constants import EXIT_FAILURE
from desktop_entry_parser.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI and exit with its status."""
    try:
        status = CLIRunner().run()
    except Exception:
        logger.exception("Unexpected error")
        status = EXIT_FAILURE
    finally:
        flush_all_handlers()
    sys.exit(status)


if __name__ == "__main__":
    main()
