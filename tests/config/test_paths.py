"""Tests for configuration path resolution."""

from pathlib import Path

from pytest import MonkeyPatch

from desktop_entry_parser.config.paths import Paths


def test_config_dir_override(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Test DESKTOP_ENTRY_PARSER_CONFIG_DIR wins over everything."""
    monkeypatch.setenv("DESKTOP_ENTRY_PARSER_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", "/somewhere/else")

    assert Paths.config_dir() == tmp_path


def test_config_dir_xdg(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Test XDG_CONFIG_HOME is used when set."""
    monkeypatch.delenv("DESKTOP_ENTRY_PARSER_CONFIG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert Paths.config_dir() == tmp_path / "desktop-entry-parser"


def test_config_dir_default(monkeypatch: MonkeyPatch) -> None:
    """Test the default lives under ~/.config."""
    monkeypatch.delenv("DESKTOP_ENTRY_PARSER_CONFIG_DIR", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    expected = Path.home() / ".config" / "desktop-entry-parser"
    assert Paths.config_dir() == expected


def test_settings_file(tmp_path: Path) -> None:
    """Test the settings file name."""
    assert Paths.settings_file(tmp_path) == tmp_path / "settings.conf"


def test_expand_path_tilde() -> None:
    """Test ~ is expanded."""
    expanded = Paths.expand_path("~/logs")
    assert expanded == Path.home() / "logs"
    assert "~" not in str(expanded)
