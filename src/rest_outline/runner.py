"""Outline one or more documents, one scan at a time."""

from __future__ import annotations

import dataclasses
import logging
import time
from pathlib import Path

from rest_outline.config import ScanConfig
from rest_outline.constants import KIND_NAMES
from rest_outline.discovery import find_documents
from rest_outline.outline.scanner import scan_lines
from rest_outline.sink import OutlineEntry, OutlineSink
from rest_outline.sources import read_lines

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class OutlineResult:
    """Result of outlining a set of paths."""

    entries: list[OutlineEntry] = dataclasses.field(default_factory=list)
    files_scanned: int = 0
    headings_found: int = 0
    errors: list[str] = dataclasses.field(default_factory=list)
    duration_ms: int = 0


def outline_file(
    path: Path,
    *,
    display_name: str | None = None,
    scan_config: ScanConfig = ScanConfig(),
    enabled_kinds: frozenset[str] = KIND_NAMES,
) -> list[OutlineEntry]:
    """Scan a single file with fresh state and return its entries."""
    sink = OutlineSink(source_file=display_name or str(path), enabled_kinds=enabled_kinds)
    found = scan_lines(read_lines(path), sink, encoding=scan_config.encoding)
    logger.debug("%s: %d heading(s), %d emitted", path, found, len(sink.entries))
    return sink.entries


def _expand_path(path: Path, scan_config: ScanConfig) -> list[tuple[Path, str]]:
    """A directory expands to the documents under it; a file is taken as given."""
    if not path.is_dir():
        return [(path, path.as_posix())]
    return [
        (doc.abs_path, (path / doc.path).as_posix())
        for doc in find_documents(
            path,
            extensions=scan_config.extensions,
            max_file_size=scan_config.max_file_size,
        )
    ]


def outline_paths(
    paths: list[Path],
    *,
    scan_config: ScanConfig = ScanConfig(),
    enabled_kinds: frozenset[str] = KIND_NAMES,
    continue_on_error: bool = False,
) -> OutlineResult:
    """Outline every file (and every document under every directory) in paths.

    continue_on_error: If False (default), re-raise read and directory walk
        errors with the path. If True, log with traceback, record the error
        and continue.
    """
    start = time.monotonic()
    result = OutlineResult()

    def _failed(name: str, e: OSError) -> None:
        if not continue_on_error:
            raise RuntimeError(f"Failed to outline {name}: {e}") from e
        logger.exception("Failed to outline %s", name)
        result.errors.append(f"{name}: {e}")

    for path in paths:
        try:
            targets = _expand_path(path, scan_config)
        except OSError as e:
            _failed(path.as_posix(), e)
            continue

        for abs_path, display_name in targets:
            try:
                entries = outline_file(
                    abs_path,
                    display_name=display_name,
                    scan_config=scan_config,
                    enabled_kinds=enabled_kinds,
                )
            except OSError as e:
                _failed(display_name, e)
                continue

            result.files_scanned += 1
            result.headings_found += len(entries)
            result.entries.extend(entries)

    result.duration_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "Outlined %d file(s): %d heading(s), %d error(s) in %dms",
        result.files_scanned, result.headings_found, len(result.errors), result.duration_ms,
    )
    return result
