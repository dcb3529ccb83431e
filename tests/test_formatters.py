"""Tests for formatters.py."""

import json

import pytest

from rest_outline.formatters import (
    FORMATTERS,
    format_json,
    format_tags,
    format_tree,
    get_formatter,
)
from rest_outline.outline.scanner import scan_lines
from rest_outline.sink import OutlineSink
from rest_outline.sources import iter_lines

_DOC = b"Intro\n=====\n\nSetup\n-----\n\nDetails\n~~~~~~~\n\nUsage\n=====\n"


@pytest.fixture
def entries():
    sink = OutlineSink(source_file="doc.rest")
    scan_lines(iter_lines(_DOC), sink)
    return sink.entries


class TestFormatTags:
    def test_sorted_by_title(self, entries):
        lines = format_tags(entries).split("\n")
        assert [line.split("\t")[0] for line in lines] == ["Details", "Intro", "Setup", "Usage"]

    def test_top_level_line(self, entries):
        lines = format_tags(entries).split("\n")
        assert lines[1] == 'Intro\tdoc.rest\t1;"\tn\tline:1'

    def test_scope_field_names_parent(self, entries):
        lines = format_tags(entries).split("\n")
        assert lines[2] == 'Setup\tdoc.rest\t4;"\tm\tline:4\tnamespace:Intro'
        assert lines[0].endswith("\tmember:Setup")

    def test_parents_resolved_per_file(self):
        all_entries = []
        for name in ("a.rest", "b.rest"):
            sink = OutlineSink(source_file=name)
            scan_lines(iter_lines(f"Top {name}\n==========\n\nSub\n---\n".encode()), sink)
            all_entries.extend(sink.entries)
        lines = [l for l in format_tags(all_entries).split("\n") if l.startswith("Sub")]
        assert lines[0].endswith("namespace:Top a.rest")
        assert lines[1].endswith("namespace:Top b.rest")

    def test_tab_in_title_escaped(self):
        sink = OutlineSink(source_file="doc.rest")
        scan_lines(iter([b"A\tB", b"======"]), sink)
        assert format_tags(sink.entries).startswith("A\\tB\tdoc.rest")

    def test_empty(self):
        assert format_tags([]) == ""


class TestFormatJson:
    def test_round_trips_fields(self, entries):
        data = json.loads(format_json(entries))
        assert len(data) == 4
        assert data[1]["title"] == "Setup"
        assert data[1]["parent"] == 0
        assert data[2]["section_path"] == "intro/setup/details"


class TestFormatTree:
    def test_indents_by_depth(self, entries):
        assert format_tree(entries).split("\n") == [
            "doc.rest",
            "  Intro (chapter, line 1)",
            "    Setup (section, line 4)",
            "      Details (subsection, line 7)",
            "  Usage (chapter, line 10)",
        ]

    def test_without_source_file(self):
        sink = OutlineSink()
        scan_lines(iter_lines(b"A\n=\n\nB\n-\n"), sink)
        assert format_tree(sink.entries) == "A (chapter, line 1)\n  B (section, line 4)"


class TestGetFormatter:
    def test_known_names(self):
        assert set(FORMATTERS) == {"tags", "json", "tree"}
        assert get_formatter("tree") is format_tree

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            get_formatter("xml")
