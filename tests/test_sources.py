"""Tests for sources.py."""

import pytest

from rest_outline.sources import iter_lines, read_lines


class TestReadLines:
    def test_strips_terminators(self, write_doc):
        path = write_doc("doc.rest", b"one\ntwo\r\nthree")
        assert list(read_lines(path)) == [b"one", b"two", b"three"]

    def test_keeps_blank_lines(self, write_doc):
        path = write_doc("doc.rest", b"a\n\n\nb\n")
        assert list(read_lines(path)) == [b"a", b"", b"", b"b"]

    def test_keeps_raw_bytes(self, write_doc):
        path = write_doc("doc.rest", b"Caf\xe9\n")
        assert list(read_lines(path)) == [b"Caf\xe9"]

    def test_missing_file_raises_with_path(self, tmp_path):
        missing = tmp_path / "nope.rest"
        with pytest.raises(OSError, match="nope.rest"):
            list(read_lines(missing))


class TestIterLines:
    def test_splits(self):
        assert list(iter_lines(b"a\nb\r\nc")) == [b"a", b"b", b"c"]

    def test_empty(self):
        assert list(iter_lines(b"")) == []
