"""Top-level package for desktop-entry-parser.

Parses freedesktop.org desktop entry files into a raw group mapping or a
typed Application, Link or Directory entry.

Usage:
    >>> from desktop_entry_parser import parse_desktop_entry
    >>> entry = parse_desktop_entry("/usr/share/applications/foo.desktop")
    >>> entry.name
"""

import os
from importlib.metadata import PackageNotFoundError, version

from desktop_entry_parser.core import (
    ApplicationEntry,
    DesktopEntry,
    DirectoryEntry,
    EntryType,
    LinkEntry,
    RawDesktopEntry,
    dumps_entry,
    dumps_raw,
    entry_to_dict,
    from_raw,
    parse_raw,
    read_raw,
)
from desktop_entry_parser.exceptions import (
    DesktopEntryError,
    EntryIOError,
    FormatError,
)

try:
    __version__ = version("desktop-entry-parser")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"

__all__ = [
    "ApplicationEntry",
    "DesktopEntry",
    "DesktopEntryError",
    "DirectoryEntry",
    "EntryIOError",
    "EntryType",
    "FormatError",
    "LinkEntry",
    "RawDesktopEntry",
    "__version__",
    "dumps_entry",
    "dumps_raw",
    "entry_to_dict",
    "from_raw",
    "parse_desktop_entry",
    "parse_desktop_entry_raw",
    "parse_desktop_entry_string",
    "parse_raw",
    "read_raw",
]


def parse_desktop_entry_raw(path: str | os.PathLike[str]) -> RawDesktopEntry:
    """Read a desktop file into its raw group mapping.

    Raises:
        EntryIOError: If the file cannot be read
        FormatError: If the content is malformed

    """
    return read_raw(path)


def parse_desktop_entry(path: str | os.PathLike[str]) -> DesktopEntry:
    """Read a desktop file into a typed entry.

    Raises:
        EntryIOError: If the file cannot be read
        FormatError: If the content is malformed or fails validation

    """
    raw = read_raw(path)
    try:
        return from_raw(raw)
    except FormatError as e:
        raise FormatError(e.message, target=os.fspath(path)) from e


def parse_desktop_entry_string(content: str) -> DesktopEntry:
    """Parse desktop file text into a typed entry.

    Raises:
        FormatError: If the content is malformed or fails validation

    """
    return from_raw(parse_raw(content))
