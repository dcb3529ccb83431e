"""Shared test fixtures."""

from pathlib import Path

import pytest

from rest_outline.sink import OutlineSink


@pytest.fixture
def sink():
    """An OutlineSink with every kind enabled."""
    return OutlineSink(source_file="doc.rest")


@pytest.fixture
def write_doc(tmp_path):
    """Write a document under tmp_path, creating parent dirs. Returns its path."""

    def _write(rel_path: str, content: str | bytes = "") -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
