"""Tests for decoding dictionary files."""

import pytest

from dsl_tables import DataImportError, Settings, parse_file, read_lines


class TestReadLines:
    """Tests for read_lines()."""

    def test_utf16_file(self, write_dsl, sample_text):
        path = write_dsl(sample_text)
        lines = list(read_lines(path))
        assert lines[0] == '#NAME "TestDict"'
        assert lines[-1] == " [p]n[/p][trn]chat[/trn]"
        assert len(lines) == 5

    def test_crlf_removed(self, write_dsl):
        path = write_dsl("cat\r\n [trn]chat[/trn]\r\n")
        assert list(read_lines(path)) == ["cat", " [trn]chat[/trn]"]

    def test_utf8_bom_stripped(self, write_dsl):
        """Test that a UTF-8 byte order mark is removed from the first line."""
        path = write_dsl('#NAME "D"\n', encoding="utf-8-sig")
        assert list(read_lines(path, encoding="utf-8")) == ['#NAME "D"']

    def test_non_ascii_text(self, write_dsl):
        path = write_dsl("кошка\n [trn]cat[/trn]\n")
        assert list(read_lines(path))[0] == "кошка"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_lines(tmp_path / "missing.dsl")

    def test_unknown_encoding(self, write_dsl):
        path = write_dsl("cat\n")
        with pytest.raises(DataImportError, match="Unknown encoding"):
            read_lines(path, encoding="no-such-codec")

    def test_undecodable_bytes(self, tmp_path):
        path = tmp_path / "broken.dsl"
        path.write_bytes(b"cat\n\xff\xfe\xfd\n")
        with pytest.raises(DataImportError, match="Failed to decode"):
            list(read_lines(path, encoding="utf-8"))


class TestParseFile:
    """Tests for parse_file()."""

    def test_parse_utf16(self, write_dsl, sample_text):
        result = parse_file(write_dsl(sample_text))
        assert result.ok
        assert len(result.tables.words) == 2

    def test_settings_encoding(self, write_dsl, sample_text):
        path = write_dsl(sample_text, encoding="utf-8")
        result = parse_file(path, Settings(encoding="utf-8"))
        assert result.ok
        assert result.stats.translations == 1

    def test_settings_keep_going(self, write_dsl):
        path = write_dsl("cat\n [m1]bad\n [trn]chat[/trn]\n")
        result = parse_file(path, Settings(fail_fast=False))
        assert result.tables is not None
        assert result.error_count == 1
