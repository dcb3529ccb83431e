"""Data models shared by the outline scanner and its sinks."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Hashable
from typing import Protocol


@dataclasses.dataclass(frozen=True)
class HeadingRecord:
    """A detected heading, handed to the sink exactly once."""

    title: str
    level: int  # 0=chapter .. 3=subsubsection
    line_number: int  # 1-based line of the title (not the underline)
    parent: Hashable | None = None  # handle of the enclosing heading


@dataclasses.dataclass(frozen=True)
class Scope:
    """An open heading on the scope stack. handle is None for placeholders."""

    level: int
    handle: Hashable | None


class TagSink(Protocol):
    def emit(self, record: HeadingRecord) -> Hashable | None: ...

    def is_live(self, handle: Hashable) -> bool: ...


def title_to_path(title: str) -> str:
    """Convert a heading title to a path segment. Non-ASCII letters are kept."""
    # Lowercase, replace spaces/special chars with underscores
    path = re.sub(r"\W+", "_", title.lower())
    path = re.sub(r"_+", "_", path).strip("_")
    return path[:60]
