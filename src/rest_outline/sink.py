"""Collecting tag sink: keeps emitted headings as outline entries."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Hashable

from rest_outline.constants import KIND_NAMES, kind_for_level
from rest_outline.outline.models import HeadingRecord, title_to_path

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class OutlineEntry:
    """One heading in a document outline."""

    title: str
    kind: str  # chapter, section, subsection, subsubsection
    letter: str  # tag kind letter (n, m, d, v)
    level: int
    line_number: int
    section_path: str  # e.g. "introduction/getting_started"
    parent: int | None = None  # index of the parent entry
    source_file: str | None = None

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


class OutlineSink:
    """TagSink storing entries in emission order. Handles are entry indexes."""

    def __init__(self, source_file: str | None = None, enabled_kinds: frozenset[str] = KIND_NAMES):
        self.source_file = source_file
        self.enabled_kinds = enabled_kinds
        self._entries: list[OutlineEntry] = []

    @property
    def entries(self) -> list[OutlineEntry]:
        return list(self._entries)

    def emit(self, record: HeadingRecord) -> int | None:
        kind = kind_for_level(record.level)
        if kind.name not in self.enabled_kinds:
            logger.debug("Skipping %s %r: kind disabled", kind.name, record.title)
            return None

        parent_path = None
        if record.parent is not None:
            parent_path = self._entries[record.parent].section_path
        # Titles made only of punctuation have no usable segment
        segment = title_to_path(record.title) or f"{kind.name}_{len(self._entries)}"
        section_path = f"{parent_path}/{segment}" if record.parent is not None else segment

        self._entries.append(OutlineEntry(
            title=record.title,
            kind=kind.name,
            letter=kind.letter,
            level=record.level,
            line_number=record.line_number,
            section_path=section_path,
            parent=record.parent,
            source_file=self.source_file,
        ))
        return len(self._entries) - 1

    def is_live(self, handle: Hashable) -> bool:
        return isinstance(handle, int) and 0 <= handle < len(self._entries)
