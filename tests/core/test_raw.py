"""Tests for the raw desktop entry tokenizer."""

from pathlib import Path

import pytest

from desktop_entry_parser.core.raw import parse_raw, read_raw
from desktop_entry_parser.exceptions import EntryIOError, FormatError


class TestParseRaw:
    """Tests for parse_raw function."""

    def test_single_group(self) -> None:
        """Test a group with one property."""
        assert parse_raw("[Group]\nKey=Value\n") == {"Group": {"Key": "Value"}}

    def test_key_and_value_are_trimmed(self) -> None:
        """Test whitespace around key and value is removed."""
        result = parse_raw("[Another Group]\nKey2 = Value2  \n")
        assert result == {"Another Group": {"Key2": "Value2"}}

    def test_empty_content(self) -> None:
        """Test empty input yields an empty mapping."""
        assert parse_raw("") == {}

    def test_multiple_groups(self) -> None:
        """Test properties go to the most recently opened group."""
        content = (
            "[Desktop Entry]\n"
            "Name=Foo\n"
            "[Desktop Action new-window]\n"
            "Name=New Window\n"
            "Exec=foo --new-window\n"
        )
        assert parse_raw(content) == {
            "Desktop Entry": {"Name": "Foo"},
            "Desktop Action new-window": {
                "Name": "New Window",
                "Exec": "foo --new-window",
            },
        }

    def test_comments_and_blank_lines_are_skipped(self) -> None:
        """Test comment and empty lines never affect the mapping."""
        content = (
            "# leading comment\n"
            "\n"
            "[Group]\n"
            "# Key=NotAValue\n"
            "\n"
            "Key=Value\n"
            "#[Other]\n"
            "\n"
        )
        assert parse_raw(content) == {"Group": {"Key": "Value"}}

    def test_comment_before_any_group_is_allowed(self) -> None:
        """Test a comment with '=' before the first header is not an entry."""
        assert parse_raw("#a=b\n[G]\nk=v") == {"G": {"k": "v"}}

    def test_split_on_first_equals(self) -> None:
        """Test only the first '=' separates key from value."""
        result = parse_raw("[G]\nExec=env FOO=bar app --opt=1\n")
        assert result["G"]["Exec"] == "env FOO=bar app --opt=1"

    def test_empty_value(self) -> None:
        """Test a key with nothing after '=' maps to an empty string."""
        assert parse_raw("[G]\nIcon=\n") == {"G": {"Icon": ""}}

    def test_duplicate_key_last_wins(self) -> None:
        """Test the last occurrence of a key within a group wins."""
        assert parse_raw("[G]\nName=First\nName=Second\n") == {
            "G": {"Name": "Second"}
        }

    def test_reopened_group_merges(self) -> None:
        """Test re-declaring a group adds to the same group."""
        content = "[A]\nx=1\ny=2\n[B]\nz=3\n[A]\ny=20\nw=4\n"
        assert parse_raw(content) == {
            "A": {"x": "1", "y": "20", "w": "4"},
            "B": {"z": "3"},
        }

    def test_group_without_properties_is_absent(self) -> None:
        """Test a header with no properties leaves no group behind."""
        assert parse_raw("[Empty]\n[Full]\nk=v\n") == {"Full": {"k": "v"}}

    def test_crlf_line_endings(self) -> None:
        """Test Windows line endings are handled."""
        assert parse_raw("[G]\r\nk=v\r\n") == {"G": {"k": "v"}}

    @pytest.mark.parametrize(
        "separator",
        ["\u2028", "\u2029", "\x0c", "\x0b", "\x1c", "\x85", "\r"],
    )
    def test_only_line_feed_ends_a_line(self, separator: str) -> None:
        """Test other line separators stay inside the value."""
        content = f"[Desktop Entry]\nType=Application\nName=A{separator}B\n"
        assert parse_raw(content)["Desktop Entry"]["Name"] == (
            f"A{separator}B"
        )

    def test_carriage_return_kept_before_other_text(self) -> None:
        """Test a '\\r' not followed by '\\n' does not end the header."""
        with pytest.raises(FormatError, match="Entry found outside of group"):
            parse_raw("[G]\rk=v\n")

    def test_group_name_kept_verbatim(self) -> None:
        """Test the group name is the text between the brackets."""
        assert parse_raw("[ Spaced Name ]\nk=v\n") == {
            " Spaced Name ": {"k": "v"}
        }

    @pytest.mark.parametrize(
        "line", ["Name=Foo", "=", "Key = Value", "[Broken=1"]
    )
    def test_property_before_group_fails(self, line: str) -> None:
        """Test a property line before any header is rejected."""
        with pytest.raises(FormatError, match="Entry found outside of group"):
            parse_raw(f"{line}\n[Group]\nKey=Value\n")

    def test_property_after_empty_group_name_fails(self) -> None:
        """Test an empty '[]' header does not open a group."""
        with pytest.raises(FormatError, match="Entry found outside of group"):
            parse_raw("[]\nKey=Value\n")

    @pytest.mark.parametrize(
        "line", ["NoSeparator", "Key: Value", "   ", "[Unclosed"]
    )
    def test_property_without_equals_fails(self, line: str) -> None:
        """Test a property line lacking '=' is rejected."""
        with pytest.raises(FormatError, match="Entry not key/value"):
            parse_raw(f"[Group]\n{line}\n")

    def test_failure_returns_nothing_partial(self) -> None:
        """Test an error late in the file aborts the whole parse."""
        with pytest.raises(FormatError) as exc_info:
            parse_raw("[G]\na=1\nb=2\nbroken\n")
        assert exc_info.value.target is None


class TestReadRaw:
    """Tests for read_raw function."""

    def test_reads_file(self, text_editor_file: Path) -> None:
        """Test reading a desktop file from disk."""
        assert read_raw(text_editor_file) == {
            "Desktop Entry": {
                "Type": "Application",
                "Name": "Text Editor",
                "Exec": "edit %f",
                "Terminal": "false",
            }
        }

    def test_accepts_str_path(self, text_editor_file: Path) -> None:
        """Test a plain string path works too."""
        assert "Desktop Entry" in read_raw(str(text_editor_file))

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises EntryIOError wrapping the cause."""
        missing = tmp_path / "missing.desktop"
        with pytest.raises(EntryIOError) as exc_info:
            read_raw(missing)

        error = exc_info.value
        assert isinstance(error.cause, FileNotFoundError)
        assert error.__cause__ is error.cause
        assert error.target == str(missing)

    def test_directory_path(self, tmp_path: Path) -> None:
        """Test reading a directory raises EntryIOError."""
        with pytest.raises(EntryIOError) as exc_info:
            read_raw(tmp_path)
        assert isinstance(exc_info.value.cause, OSError)

    def test_undecodable_bytes(self, tmp_path: Path) -> None:
        """Test invalid UTF-8 surfaces as EntryIOError."""
        path = tmp_path / "latin1.desktop"
        path.write_bytes(b"[Desktop Entry]\nName=Caf\xe9\n")
        with pytest.raises(EntryIOError) as exc_info:
            read_raw(path)
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_format_error_names_file(self, write_desktop_file) -> None:
        """Test format errors from a file carry the file path."""
        path = write_desktop_file("Name=Foo\n")
        with pytest.raises(FormatError) as exc_info:
            read_raw(path)

        assert exc_info.value.target == str(path)
        assert exc_info.value.message == "Entry found outside of group"
        assert str(path) in str(exc_info.value)

    def test_lone_carriage_return_in_value(self, tmp_path: Path) -> None:
        """Test a lone carriage return in the file is not a line break."""
        path = tmp_path / "cr.desktop"
        path.write_bytes(b"[Desktop Entry]\r\nName=A\rB\r\n")

        assert read_raw(path) == {"Desktop Entry": {"Name": "A\rB"}}
