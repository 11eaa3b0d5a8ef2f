"""Desktop entry parsing: raw tokenizer, typed projection, serialization."""

from desktop_entry_parser.core.entry import (
    ApplicationEntry,
    DesktopEntry,
    DirectoryEntry,
    EntryType,
    LinkEntry,
    build_application,
    build_directory,
    build_link,
    from_raw,
)
from desktop_entry_parser.core.raw import RawDesktopEntry, parse_raw, read_raw
from desktop_entry_parser.core.serialize import (
    dumps_entry,
    dumps_raw,
    entry_to_dict,
)

__all__ = [
    "ApplicationEntry",
    "DesktopEntry",
    "DirectoryEntry",
    "EntryType",
    "LinkEntry",
    "RawDesktopEntry",
    "build_application",
    "build_directory",
    "build_link",
    "dumps_entry",
    "dumps_raw",
    "entry_to_dict",
    "from_raw",
    "parse_raw",
    "read_raw",
]
