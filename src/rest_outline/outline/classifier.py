"""Underline character -> heading level, assigned in first-seen order."""

from __future__ import annotations

import logging

from rest_outline.constants import MAX_LEVELS

logger = logging.getLogger(__name__)


class UnderlineClassifier:
    """Per-document level table.

    The first distinct underline character seen becomes level 0, the second
    level 1, and so on up to MAX_LEVELS. Assignments never change; once the
    table is full, unseen characters are not heading markers.
    """

    def __init__(self, capacity: int = MAX_LEVELS):
        self._capacity = capacity
        self._chars: list[int] = []

    def classify(self, char: int) -> int | None:
        """Return the level for an underline byte, or None if the table is full."""
        for level, assigned in enumerate(self._chars):
            if assigned == char:
                return level
        if len(self._chars) < self._capacity:
            self._chars.append(char)
            logger.debug("Underline %r assigned level %d", chr(char), len(self._chars) - 1)
            return len(self._chars) - 1
        logger.debug("Underline %r rejected: all %d levels assigned", chr(char), self._capacity)
        return None

    def reset(self) -> None:
        self._chars.clear()

    @property
    def assignments(self) -> tuple[tuple[str, int], ...]:
        """(character, level) pairs in assignment order."""
        return tuple((chr(c), level) for level, c in enumerate(self._chars))
