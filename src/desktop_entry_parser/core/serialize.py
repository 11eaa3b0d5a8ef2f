"""Dict and JSON views of parsed entries."""

from dataclasses import fields
from typing import Any

import orjson

from desktop_entry_parser.core.entry import DesktopEntry
from desktop_entry_parser.core.raw import RawDesktopEntry

_JSON_OPTIONS = orjson.OPT_INDENT_2


def entry_to_dict(
    entry: DesktopEntry, *, include_unset: bool = False
) -> dict[str, Any]:
    """Convert an entry to a dict with the ``type`` discriminator first.

    Args:
        entry: Parsed entry
        include_unset: Keep fields whose value is None

    Returns:
        Field name to value mapping

    """
    data: dict[str, Any] = {"type": entry.entry_type.value}
    for field in fields(entry):
        value = getattr(entry, field.name)
        if value is not None or include_unset:
            data[field.name] = value
    return data


def dumps_entry(entry: DesktopEntry, *, include_unset: bool = False) -> bytes:
    """Serialize an entry to indented JSON."""
    return orjson.dumps(
        entry_to_dict(entry, include_unset=include_unset),
        option=_JSON_OPTIONS,
    )


def dumps_raw(raw: RawDesktopEntry) -> bytes:
    """Serialize a raw mapping to indented JSON, keys sorted."""
    return orjson.dumps(raw, option=_JSON_OPTIONS | orjson.OPT_SORT_KEYS)
