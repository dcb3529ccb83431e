"""Scope stack reconciliation: attaches each heading to its enclosing heading."""

from __future__ import annotations

import logging
from collections.abc import Hashable

from rest_outline.outline.models import HeadingRecord, Scope, TagSink

logger = logging.getLogger(__name__)


class ScopeStack:
    """Open headings, innermost last."""

    def __init__(self):
        self._scopes: list[Scope] = []

    def push(self, scope: Scope) -> None:
        self._scopes.append(scope)

    def pop(self) -> Scope:
        return self._scopes.pop()

    @property
    def top(self) -> Scope | None:
        return self._scopes[-1] if self._scopes else None

    def clear(self) -> None:
        self._scopes.clear()

    def __len__(self) -> int:
        return len(self._scopes)

    def __iter__(self):
        return iter(self._scopes)


class HierarchyBuilder:
    def __init__(self, sink: TagSink):
        self._sink = sink
        self.stack = ScopeStack()

    def _is_open(self, scope: Scope, level: int) -> bool:
        """A scope can parent a heading of `level` only if it is shallower and still in the sink."""
        if scope.level >= level:
            return False
        if scope.handle is None:
            return False
        return self._sink.is_live(scope.handle)

    def _enclosing(self, level: int) -> Scope | None:
        """Pop scopes that cannot enclose a heading of `level`; return the one that can."""
        while self.stack.top is not None and not self._is_open(self.stack.top, level):
            self.stack.pop()
        return self.stack.top

    def add(self, title: str, level: int, underline_line: int) -> Hashable | None:
        """Record a confirmed heading whose underline sits on `underline_line` (1-based).

        Returns the sink's handle, or None when nothing was emitted (empty
        title, or the sink declined the record). A scope is pushed either way.
        """
        parent = self._enclosing(level)
        handle = None

        if title:
            record = HeadingRecord(
                title=title,
                level=level,
                line_number=underline_line - 1,
                parent=parent.handle if parent else None,
            )
            handle = self._sink.emit(record)
            logger.debug(
                "Heading %r level=%d line=%d parent=%r -> %r",
                title, level, record.line_number, record.parent, handle,
            )

        self.stack.push(Scope(level=level, handle=handle))
        return handle

    def reset(self) -> None:
        self.stack.clear()
