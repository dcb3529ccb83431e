"""Find reST documents under a directory tree."""

import logging
from dataclasses import dataclass
from pathlib import Path

import pathspec

from rest_outline.constants import REST_EXTENSIONS, is_rest_file

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 1_048_576  # 1 MB

SKIP_DIRS: set[str] = {
    ".git",
    "__pycache__",
    ".venv",
    "venv",
    ".rest_outline",
    "_build",
    "build",
    "dist",
}


@dataclass(frozen=True)
class DocumentInfo:
    path: str  # relative to root, forward-slash separated
    abs_path: Path
    size_bytes: int


def _load_gitignore_spec(root: Path) -> pathspec.PathSpec | None:
    """Parse .gitignore at the root. Returns None if absent."""
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return None
    text = gitignore.read_text(encoding="utf-8", errors="replace")
    return pathspec.PathSpec.from_lines("gitignore", text.splitlines())


def _should_skip_dir(name: str) -> bool:
    return name in SKIP_DIRS or name.endswith(".egg-info")


def _walk(root: Path, gitignore_spec: pathspec.PathSpec | None):
    """Yield (relative_posix_path, abs_path) for every candidate file."""
    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        try:
            entries = sorted(current.iterdir(), key=lambda p: p.name)
        except PermissionError as e:
            raise PermissionError(f"Cannot read directory {current}: {e}") from e

        for entry in entries:
            rel = entry.relative_to(root).as_posix()
            if entry.is_dir():
                if _should_skip_dir(entry.name):
                    continue
                if gitignore_spec is not None and gitignore_spec.match_file(rel + "/"):
                    continue
                stack.append(entry)
            elif entry.is_file():
                if gitignore_spec is not None and gitignore_spec.match_file(rel):
                    continue
                yield rel, entry


def find_documents(
    root: Path,
    *,
    extensions: tuple[str, ...] = REST_EXTENSIONS,
    max_file_size: int = MAX_FILE_SIZE,
) -> list[DocumentInfo]:
    """Return every reST document under root, sorted by relative path.

    Files are filtered by name pattern / extension, skip dirs, .gitignore
    and max file size.
    """
    root = root.resolve()
    gitignore_spec = _load_gitignore_spec(root)
    results: list[DocumentInfo] = []

    for rel_path, abs_path in _walk(root, gitignore_spec):
        if not is_rest_file(abs_path.name, extensions):
            continue
        size = abs_path.stat().st_size
        if size > max_file_size:
            logger.warning("Skipping oversized file (%d bytes): %s", size, rel_path)
            continue
        results.append(DocumentInfo(path=rel_path, abs_path=abs_path, size_bytes=size))

    results.sort(key=lambda d: d.path)
    return results
