"""Tests for the console script entry point."""

from unittest.mock import patch

import pytest

from desktop_entry_parser import main


def test_main_exits_with_runner_status():
    """Test main() exits with the status returned by the runner."""
    with patch("desktop_entry_parser.main.CLIRunner") as mock_runner_cls:
        mock_runner_cls.return_value.run.return_value = 0
        with pytest.raises(SystemExit) as exc_info:
            main.main()

    assert exc_info.value.code == 0
    mock_runner_cls.return_value.run.assert_called_once_with()


def test_main_unexpected_error(caplog):
    """Test main() logs unexpected errors and exits with status 1."""
    with patch("desktop_entry_parser.main.CLIRunner") as mock_runner_cls:
        mock_runner_cls.return_value.run.side_effect = RuntimeError("boom")
        with pytest.raises(SystemExit) as exc_info:
            main.main()

    assert exc_info.value.code == 1
    assert "Unexpected error" in caplog.text


def test_main_version(monkeypatch, capsys, tmp_path):
    """Test the real runner prints the version through main()."""
    monkeypatch.setenv("DESKTOP_ENTRY_PARSER_CONFIG_DIR", str(tmp_path))
    monkeypatch.setattr("sys.argv", ["desktop-entry-parser", "--version"])

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip()
