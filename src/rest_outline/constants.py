"""Centralized kind / file extension constants."""

from __future__ import annotations

import dataclasses
import fnmatch
import string


@dataclasses.dataclass(frozen=True)
class Kind:
    """A heading kind: semantic name plus the tag letter/name it is written as."""

    level: int
    name: str  # chapter, section, subsection, subsubsection
    letter: str
    tag_name: str
    description: str


# Index == level. Letters and tag names follow the ctags reST kinds.
KINDS: tuple[Kind, ...] = (
    Kind(0, "chapter", "n", "namespace", "chapters"),
    Kind(1, "section", "m", "member", "sections"),
    Kind(2, "subsection", "d", "macro", "subsections"),
    Kind(3, "subsubsection", "v", "variable", "subsubsections"),
)

KIND_NAMES: frozenset[str] = frozenset(k.name for k in KINDS)

MAX_LEVELS = len(KINDS)

# Locale-independent: C ispunct() in the "C" locale.
PUNCTUATION: frozenset[int] = frozenset(string.punctuation.encode("ascii"))

# C isspace() in the "C" locale.
WHITESPACE: frozenset[int] = frozenset(b" \t\n\v\f\r")

REST_EXTENSIONS: tuple[str, ...] = (".rest",)
REST_PATTERNS: tuple[str, ...] = ("*.rest", "*.reST")


def kind_for_level(level: int) -> Kind:
    """Map a heading level (0..3) to its Kind. Raises ValueError if out of range."""
    if not 0 <= level < MAX_LEVELS:
        raise ValueError(f"Heading level out of range: {level}")
    return KINDS[level]


def is_rest_file(file_path: str, extensions: tuple[str, ...] = REST_EXTENSIONS) -> bool:
    """True if the file name matches a reST pattern or one of the given extensions."""
    name = file_path.replace("\\", "/").rsplit("/", 1)[-1]
    for pattern in REST_PATTERNS:
        if fnmatch.fnmatchcase(name, pattern):
            return True
    return any(name.endswith(ext) for ext in extensions)
