"""Render outline entries as tags lines, JSON or an indented tree."""

from __future__ import annotations

import json
from typing import Callable

from rest_outline.constants import KINDS
from rest_outline.sink import OutlineEntry

_TAG_NAMES = {k.name: k.tag_name for k in KINDS}


def _escape_tag_field(value: str) -> str:
    """Tabs and newlines would break the tags line layout."""
    return value.replace("\\", "\\\\").replace("\t", "\\t").replace("\n", "\\n")


def format_tags(entries: list[OutlineEntry]) -> str:
    """ctags-style lines, sorted by tag name then file then line."""
    lines: list[str] = []
    for e in sorted(entries, key=lambda e: (e.title, e.source_file or "", e.line_number)):
        fields = [
            _escape_tag_field(e.title),
            e.source_file or "-",
            f'{e.line_number};"',
            e.letter,
            f"line:{e.line_number}",
        ]
        if e.parent is not None:
            parent = _find_parent(entries, e)
            if parent is not None:
                fields.append(f"{_TAG_NAMES[parent.kind]}:{_escape_tag_field(parent.title)}")
        lines.append("\t".join(fields))
    return "\n".join(lines)


def _find_parent(entries: list[OutlineEntry], entry: OutlineEntry) -> OutlineEntry | None:
    """Parents are indexes into the entry list of the same source file."""
    same_file = [e for e in entries if e.source_file == entry.source_file]
    if entry.parent is None or entry.parent >= len(same_file):
        return None
    return same_file[entry.parent]


def format_json(entries: list[OutlineEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)


def format_tree(entries: list[OutlineEntry]) -> str:
    """Indented outline, two spaces per ancestor."""
    lines: list[str] = []
    current_file = object()
    depth_by_index: dict[int, int] = {}
    index = 0

    for e in entries:
        if e.source_file != current_file:
            current_file = e.source_file
            depth_by_index = {}
            index = 0
            if e.source_file:
                lines.append(e.source_file)

        depth = 0 if e.parent is None else depth_by_index.get(e.parent, -1) + 1
        depth_by_index[index] = depth
        index += 1

        indent = "  " * (depth + (1 if e.source_file else 0))
        lines.append(f"{indent}{e.title} ({e.kind}, line {e.line_number})")
    return "\n".join(lines)


FORMATTERS: dict[str, Callable[[list[OutlineEntry]], str]] = {
    "tags": format_tags,
    "json": format_json,
    "tree": format_tree,
}


def get_formatter(name: str) -> Callable[[list[OutlineEntry]], str]:
    if name not in FORMATTERS:
        raise ValueError(
            f"Unknown output format {name!r}. "
            f"Valid options: {', '.join(sorted(FORMATTERS))}"
        )
    return FORMATTERS[name]
