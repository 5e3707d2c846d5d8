"""Shared test fixtures — sample buffers and temp files."""

from __future__ import annotations

from pathlib import Path

import pytest

from hexen.core.models import FileBuffer


def _buffer(name: str, data: bytes) -> FileBuffer:
    return FileBuffer(id=f"id-{name}", name=name, data=data)


@pytest.fixture
def make_buffer():
    """Factory for in-memory FileBuffers with a stable id derived from the name."""
    return _buffer


@pytest.fixture
def file_a() -> FileBuffer:
    """Three bytes: ABC."""
    return _buffer("a.bin", bytes([0x41, 0x42, 0x43]))


@pytest.fixture
def file_b() -> FileBuffer:
    """Four bytes, second byte differs from file_a, one extra byte."""
    return _buffer("b.bin", bytes([0x41, 0x00, 0x43, 0x44]))


@pytest.fixture
def empty_file() -> FileBuffer:
    return _buffer("empty.bin", b"")


@pytest.fixture
def full_line_file() -> FileBuffer:
    """Exactly sixteen bytes."""
    return _buffer("full.bin", bytes(range(16)))


@pytest.fixture
def bin_files(tmp_path: Path) -> tuple[Path, Path]:
    """Two files on disk that differ at offset 1 and in length."""
    a = tmp_path / "a.bin"
    b = tmp_path / "b.bin"
    a.write_bytes(bytes([0x41, 0x42, 0x43]))
    b.write_bytes(bytes([0x41, 0x00, 0x43, 0x44]))
    return a, b
