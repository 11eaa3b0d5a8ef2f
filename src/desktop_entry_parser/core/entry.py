"""Typed desktop entries.

Projects the ``Desktop Entry`` group of a raw mapping onto one of three
entry types. Each type has its own builder so the required and optional keys
of a type are visible in one place.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, final

from desktop_entry_parser.constants import (
    BOOLEAN_TRUE_LITERAL,
    DESKTOP_ENTRY_GROUP,
    KEY_ACTIONS,
    KEY_CATEGORIES,
    KEY_COMMENT,
    KEY_EXEC,
    KEY_GENERIC_NAME,
    KEY_HIDDEN,
    KEY_ICON,
    KEY_KEYWORDS,
    KEY_MIME_TYPE,
    KEY_NAME,
    KEY_NO_DISPLAY,
    KEY_NOT_SHOW_IN,
    KEY_ONLY_SHOW_IN,
    KEY_PATH,
    KEY_PREFERS_NON_DEFAULT_GPU,
    KEY_SINGLE_MAIN_WINDOW,
    KEY_STARTUP_NOTIFY,
    KEY_STARTUP_WM_CLASS,
    KEY_TERMINAL,
    KEY_TRY_EXEC,
    KEY_TYPE,
    KEY_URL,
    KEY_VERSION,
)
from desktop_entry_parser.core.raw import RawDesktopEntry
from desktop_entry_parser.exceptions import FormatError
from desktop_entry_parser.logger import get_logger

logger = get_logger(__name__)

Group = Mapping[str, str]


class EntryType(Enum):
    """Values of the ``Type`` key."""

    APPLICATION = "Application"
    LINK = "Link"
    DIRECTORY = "Directory"


@dataclass(frozen=True, kw_only=True)
class _EntryBase:
    """Presentation and visibility fields common to every entry type."""

    entry_type: ClassVar[EntryType]

    name: str
    version: str | None = None
    generic_name: str | None = None
    no_display: bool | None = None
    comment: str | None = None
    icon: str | None = None
    hidden: bool | None = None
    only_show_in: str | None = None
    not_show_in: str | None = None


@final
@dataclass(frozen=True, kw_only=True)
class ApplicationEntry(_EntryBase):
    """A launchable application (``Type=Application``)."""

    entry_type: ClassVar[EntryType] = EntryType.APPLICATION

    try_exec: str | None = None
    exec: str | None = None
    path: str | None = None
    terminal: bool | None = None
    actions: str | None = None
    mime_type: str | None = None
    categories: str | None = None
    keywords: str | None = None
    startup_notify: bool | None = None
    startup_wm_class: str | None = None
    prefers_non_default_gpu: bool | None = None
    single_main_window: bool | None = None


@final
@dataclass(frozen=True, kw_only=True)
class LinkEntry(_EntryBase):
    """A link to a URL (``Type=Link``)."""

    entry_type: ClassVar[EntryType] = EntryType.LINK

    url: str


@final
@dataclass(frozen=True, kw_only=True)
class DirectoryEntry(_EntryBase):
    """A menu directory (``Type=Directory``)."""

    entry_type: ClassVar[EntryType] = EntryType.DIRECTORY


DesktopEntry = ApplicationEntry | LinkEntry | DirectoryEntry


def _required(group: Group, key: str) -> str:
    try:
        return group[key]
    except KeyError:
        msg = f"Missing required key '{key}'"
        raise FormatError(msg) from None


def _optional_bool(group: Group, key: str) -> bool | None:
    """Read an optional boolean key.

    Anything other than the literal ``true`` is False, so a malformed value
    never fails the parse. An absent key stays None.
    """
    value = group.get(key)
    if value is None:
        return None
    return value == BOOLEAN_TRUE_LITERAL


def build_application(group: Group) -> ApplicationEntry:
    """Build an application entry from a ``Desktop Entry`` group.

    Raises:
        FormatError: If ``Name`` is missing

    """
    return ApplicationEntry(
        name=_required(group, KEY_NAME),
        version=group.get(KEY_VERSION),
        generic_name=group.get(KEY_GENERIC_NAME),
        no_display=_optional_bool(group, KEY_NO_DISPLAY),
        comment=group.get(KEY_COMMENT),
        icon=group.get(KEY_ICON),
        hidden=_optional_bool(group, KEY_HIDDEN),
        only_show_in=group.get(KEY_ONLY_SHOW_IN),
        not_show_in=group.get(KEY_NOT_SHOW_IN),
        try_exec=group.get(KEY_TRY_EXEC),
        exec=group.get(KEY_EXEC),
        path=group.get(KEY_PATH),
        terminal=_optional_bool(group, KEY_TERMINAL),
        actions=group.get(KEY_ACTIONS),
        mime_type=group.get(KEY_MIME_TYPE),
        categories=group.get(KEY_CATEGORIES),
        keywords=group.get(KEY_KEYWORDS),
        startup_notify=_optional_bool(group, KEY_STARTUP_NOTIFY),
        startup_wm_class=group.get(KEY_STARTUP_WM_CLASS),
        prefers_non_default_gpu=_optional_bool(
            group, KEY_PREFERS_NON_DEFAULT_GPU
        ),
        single_main_window=_optional_bool(group, KEY_SINGLE_MAIN_WINDOW),
    )


def build_link(group: Group) -> LinkEntry:
    """Build a link entry from a ``Desktop Entry`` group.

    Raises:
        FormatError: If ``Name`` or ``URL`` is missing

    """
    return LinkEntry(
        name=_required(group, KEY_NAME),
        version=group.get(KEY_VERSION),
        generic_name=group.get(KEY_GENERIC_NAME),
        no_display=_optional_bool(group, KEY_NO_DISPLAY),
        comment=group.get(KEY_COMMENT),
        icon=group.get(KEY_ICON),
        hidden=_optional_bool(group, KEY_HIDDEN),
        only_show_in=group.get(KEY_ONLY_SHOW_IN),
        not_show_in=group.get(KEY_NOT_SHOW_IN),
        url=_required(group, KEY_URL),
    )


def build_directory(group: Group) -> DirectoryEntry:
    """Build a directory entry from a ``Desktop Entry`` group.

    Raises:
        FormatError: If ``Name`` is missing

    """
    return DirectoryEntry(
        name=_required(group, KEY_NAME),
        version=group.get(KEY_VERSION),
        generic_name=group.get(KEY_GENERIC_NAME),
        no_display=_optional_bool(group, KEY_NO_DISPLAY),
        comment=group.get(KEY_COMMENT),
        icon=group.get(KEY_ICON),
        hidden=_optional_bool(group, KEY_HIDDEN),
        only_show_in=group.get(KEY_ONLY_SHOW_IN),
        not_show_in=group.get(KEY_NOT_SHOW_IN),
    )



_BUILDERS: dict[EntryType, Callable[[Group], DesktopEntry]] = {
    EntryType.APPLICATION: build_application,
    EntryType.LINK: build_link,
    EntryType.DIRECTORY: build_directory,
}


def from_raw(raw: RawDesktopEntry) -> DesktopEntry:
    """Project a raw mapping onto a typed entry.

    Only the ``Desktop Entry`` group is read; action groups and any other
    groups are ignored.

    Args:
        raw: Raw mapping from parse_raw() or read_raw()

    Returns:
        ApplicationEntry, LinkEntry or DirectoryEntry depending on ``Type``

    Raises:
        FormatError: If the group or ``Type`` is missing, ``Type`` is not a
            known entry type, or a required key of that type is missing

    """
    group = raw.get(DESKTOP_ENTRY_GROUP)
    if group is None:
        raise FormatError("Desktop entry group missing")

    type_value = group.get(KEY_TYPE)
    if type_value is None:
        raise FormatError("Entry type missing")

    try:
        entry_type = EntryType(type_value)
    except ValueError:
        msg = f"Unknown entry type: {type_value}"
        raise FormatError(msg) from None

    entry = _BUILDERS[entry_type](group)
    logger.debug("Projected %s entry '%s'", entry_type.value, entry.name)
    return entry
