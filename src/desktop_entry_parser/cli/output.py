"""Text rendering of parsed entries for the CLI."""

from typing import Any

from desktop_entry_parser.core import (
    DesktopEntry,
    RawDesktopEntry,
    entry_to_dict,
)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "-"
    return str(value)


def format_entry(entry: DesktopEntry, *, include_unset: bool = False) -> str:
    """Render an entry as ``field: value`` lines, type first.

    Args:
        entry: Parsed entry
        include_unset: Also list fields that are not set

    Returns:
        Multi-line text without a trailing newline

    """
    data = entry_to_dict(entry, include_unset=include_unset)
    width = max(len(field) for field in data)
    return "\n".join(
        f"{field:<{width}} : {_format_value(value)}"
        for field, value in data.items()
    )


def format_raw(raw: RawDesktopEntry) -> str:
    """Render a raw mapping back in desktop file syntax.

    Groups are separated by a blank line; order follows the mapping.
    """
    blocks = []
    for group, properties in raw.items():
        lines = [f"[{group}]"]
        lines.extend(f"{key}={value}" for key, value in properties.items())
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_file_header(path: str) -> str:
    """Header printed above each file's output when several are shown."""
    return f"==> {path} <=="
