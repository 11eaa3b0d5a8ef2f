"""Pytest configuration and fixtures for desktop-entry-parser tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

TEXT_EDITOR_ENTRY = """\
[Desktop Entry]
Type=Application
Name=Text Editor
Exec=edit %f
Terminal=false
"""


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for package loggers during tests.

    The package root logger is created with propagate=False; turning it on
    lets pytest's caplog fixture see records.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("desktop_entry_parser"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def write_desktop_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes desktop file content into tmp_path."""

    def _write(content: str, name: str = "app.desktop") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def text_editor_file(write_desktop_file: Callable[..., Path]) -> Path:
    """Desktop file for a simple text editor application."""
    return write_desktop_file(TEXT_EDITOR_ENTRY, "text-editor.desktop")
