"""Underline detection: decides whether a line confirms the previous one as a title."""

from __future__ import annotations

from dataclasses import dataclass

from rest_outline.constants import PUNCTUATION, WHITESPACE
from rest_outline.outline.classifier import UnderlineClassifier


@dataclass(frozen=True)
class Detection:
    title: bytes
    level: int


def utf8_length(data: bytes) -> int | None:
    """Count code points by leading-byte pattern, or None if data doesn't look like UTF-8.

    Quick and naive: continuation bytes are skipped, not validated. A byte
    that can't start a sequence, or a sequence running past the end, fails.
    """
    end = len(data)
    pos = 0
    count = 0
    while pos < end:
        lead = data[pos]
        if not lead & 0x80:
            pos += 1
        elif (lead & 0xE0) == 0xC0:
            pos += 2
        elif (lead & 0xF0) == 0xE0:
            pos += 3
        elif (lead & 0xF8) == 0xF0:
            pos += 4
        else:
            return None
        if pos > end:
            return None
        count += 1
    return count


def display_length(data: bytes) -> int:
    """Code-point count for UTF-8 looking data, byte count otherwise."""
    length = utf8_length(data)
    return len(data) if length is None else length


def is_uniform(line: bytes) -> bool:
    """True if every byte equals the first one."""
    return line.count(line[:1]) == len(line)


class HeadingDetector:
    """Holds one line of lookback (the title candidate) and tests each new line against it.

    The candidate survives a confirmed underline; any line that isn't a
    confirming underline replaces it, or clears it when the line is empty
    or starts with whitespace.
    """

    def __init__(self, classifier: UnderlineClassifier):
        self._classifier = classifier
        self._candidate = b""

    @property
    def candidate(self) -> bytes:
        return self._candidate

    def feed(self, line: bytes) -> Detection | None:
        """Consume one line. Returns a Detection when it underlines the candidate."""
        name_len = display_length(self._candidate)
        if (
            name_len > 0
            and len(line) >= name_len
            and line[0] in PUNCTUATION
            and is_uniform(line)
        ):
            level = self._classifier.classify(line[0])
            if level is not None:
                return Detection(title=self._candidate, level=level)

        if line and line[0] not in WHITESPACE:
            self._candidate = bytes(line)
        else:
            self._candidate = b""
        return None

    def reset(self) -> None:
        self._candidate = b""
