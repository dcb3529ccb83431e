"""Tests for constants.py."""

import pytest

from rest_outline.constants import (
    KINDS,
    PUNCTUATION,
    is_rest_file,
    kind_for_level,
)


class TestKinds:
    def test_levels_match_index(self):
        assert [k.level for k in KINDS] == [0, 1, 2, 3]

    def test_names_and_letters(self):
        assert [(k.name, k.letter, k.tag_name) for k in KINDS] == [
            ("chapter", "n", "namespace"),
            ("section", "m", "member"),
            ("subsection", "d", "macro"),
            ("subsubsection", "v", "variable"),
        ]

    def test_kind_for_level(self):
        assert kind_for_level(2).name == "subsection"

    def test_kind_for_level_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            kind_for_level(4)


class TestPunctuation:
    def test_ascii_punctuation_only(self):
        assert ord("=") in PUNCTUATION
        assert ord("~") in PUNCTUATION
        assert ord("a") not in PUNCTUATION
        assert ord(" ") not in PUNCTUATION
        assert 0xA7 not in PUNCTUATION  # latin-1 section sign


class TestIsRestFile:
    def test_rest_extension(self):
        assert is_rest_file("docs/guide.rest")

    def test_rest_pattern_mixed_case(self):
        assert is_rest_file("guide.reST")

    def test_rst_needs_configured_extension(self):
        assert not is_rest_file("guide.rst")
        assert is_rest_file("guide.rst", (".rest", ".rst"))

    def test_windows_separator(self):
        assert is_rest_file("docs\\guide.rest")

    def test_other_files(self):
        assert not is_rest_file("README.md")
