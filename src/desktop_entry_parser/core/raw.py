"""Raw desktop entry tokenizer.

Turns desktop file text into a ``group -> key -> value`` mapping without
interpreting any key. The typed layer in ``entry.py`` builds on this.
"""

import os

from desktop_entry_parser.constants import (
    CARRIAGE_RETURN,
    COMMENT_PREFIX,
    DESKTOP_FILE_ENCODING,
    GROUP_HEADER_END,
    GROUP_HEADER_START,
    KEY_VALUE_SEPARATOR,
    LINE_FEED,
)
from desktop_entry_parser.exceptions import EntryIOError, FormatError
from desktop_entry_parser.logger import get_logger

logger = get_logger(__name__)

# Group name -> (key -> value)
RawDesktopEntry = dict[str, dict[str, str]]


def _is_group_header(line: str) -> bool:
    return line.startswith(GROUP_HEADER_START) and line.endswith(
        GROUP_HEADER_END
    )


def _split_lines(content: str) -> list[str]:
    """Split on line feeds only, dropping one carriage return before each.

    Other separators such as form feed or U+2028 stay inside the line.
    """
    *terminated, last = content.split(LINE_FEED)
    return [line.removesuffix(CARRIAGE_RETURN) for line in terminated] + [
        last
    ]


def parse_raw(content: str) -> RawDesktopEntry:
    """Parse desktop file text into a raw mapping.

    Lines are classified as-is, without stripping: empty lines and lines
    starting with ``#`` are skipped, ``[Name]`` lines open a group, and
    everything else must be a ``key=value`` property of the open group.
    Re-opening a group name adds to the existing group. Within a group the
    last value of a duplicated key wins. A group only appears in the
    result once it holds at least one property.

    Args:
        content: Full text of a desktop file

    Returns:
        Mapping of group name to that group's properties

    Raises:
        FormatError: If a property appears before any group header, or a
            property line has no ``=``

    """
    groups: RawDesktopEntry = {}
    current_group = ""

    for line in _split_lines(content):
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        if _is_group_header(line):
            current_group = line[1:-1]
            logger.debug("Opened group [%s]", current_group)
            continue

        if not current_group:
            raise FormatError("Entry found outside of group")

        key, separator, value = line.partition(KEY_VALUE_SEPARATOR)
        if not separator:
            raise FormatError("Entry not key/value")

        groups.setdefault(current_group, {})[key.strip()] = value.strip()

    return groups


def read_raw(path: str | os.PathLike[str]) -> RawDesktopEntry:
    """Read a desktop file and parse it into a raw mapping.

    Args:
        path: Path to the desktop file

    Returns:
        Mapping of group name to that group's properties

    Raises:
        EntryIOError: If the file cannot be read or decoded
        FormatError: If the content is malformed

    """
    target = os.fspath(path)
    try:
        with open(path, encoding=DESKTOP_FILE_ENCODING, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise EntryIOError(str(e), target=target, cause=e) from e

    try:
        raw = parse_raw(content)
    except FormatError as e:
        raise FormatError(e.message, target=target) from e

    logger.debug("Read %d group(s) from %s", len(raw), target)
    return raw
