"""Line sources: raw byte lines with the line terminator stripped."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def iter_lines(data: bytes) -> Iterator[bytes]:
    """Split in-memory bytes into lines without terminators."""
    for line in data.splitlines():
        yield line


def read_lines(path: Path) -> Iterator[bytes]:
    """Lazily yield the lines of a file as bytes, stripping \\n and \\r\\n.

    Raises OSError naming the path if the file can't be opened.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise OSError(f"Cannot read {path}: {e}") from e
    with f:
        for raw in f:
            if raw.endswith(b"\r\n"):
                yield raw[:-2]
            elif raw.endswith(b"\n"):
                yield raw[:-1]
            else:
                yield raw
