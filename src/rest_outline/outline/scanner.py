"""Single-document scan: line source -> detector -> classifier -> hierarchy -> sink."""

from __future__ import annotations

import logging
from typing import Iterable

from rest_outline.outline.classifier import UnderlineClassifier
from rest_outline.outline.detector import HeadingDetector
from rest_outline.outline.hierarchy import HierarchyBuilder
from rest_outline.outline.models import TagSink

logger = logging.getLogger(__name__)


class OutlineScanner:
    """Owns all per-document state. One instance scans one document at a time."""

    def __init__(self, sink: TagSink, encoding: str = "utf-8"):
        self.encoding = encoding
        self.classifier = UnderlineClassifier()
        self.detector = HeadingDetector(self.classifier)
        self.builder = HierarchyBuilder(sink)

    def reset(self) -> None:
        self.classifier.reset()
        self.detector.reset()
        self.builder.reset()

    def scan(self, lines: Iterable[bytes]) -> int:
        """Scan a document from the start. Returns the number of confirmed headings."""
        self.reset()
        found = 0
        for line_number, line in enumerate(lines, start=1):
            detection = self.detector.feed(line)
            if detection is None:
                continue
            title = detection.title.decode(self.encoding, errors="replace")
            self.builder.add(title, detection.level, line_number)
            found += 1

        logger.debug(
            "Scan complete: %d heading(s), levels %s, %d scope(s) left open",
            found, self.classifier.assignments, len(self.builder.stack),
        )
        return found


def scan_lines(lines: Iterable[bytes], sink: TagSink, encoding: str = "utf-8") -> int:
    """Scan one document with fresh state. Returns the number of confirmed headings."""
    return OutlineScanner(sink, encoding=encoding).scan(lines)
