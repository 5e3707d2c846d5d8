"""Byte grid — split a buffer into fixed-width rows padded with Absent.

Rows are produced lazily over a ``memoryview`` so a large buffer is never
copied in full; only the cells of each yielded row are materialised.
"""

from __future__ import annotations

from typing import Iterator, Union

from hexen.core.models import Absent, Cell, FileBuffer, Row

BufferLike = Union[FileBuffer, bytes, bytearray, memoryview]


def _raw(buffer: BufferLike) -> memoryview:
    data = buffer.data if isinstance(buffer, FileBuffer) else buffer
    return memoryview(data).cast("B")


def check_line_width(line_width: int) -> None:
    """Raise ValueError unless *line_width* is a positive int."""
    if isinstance(line_width, bool) or not isinstance(line_width, int):
        raise ValueError(f"line width must be an int, got {line_width!r}")
    if line_width <= 0:
        raise ValueError(f"line width must be positive, got {line_width}")


def line_count(length: int, line_width: int) -> int:
    """Number of rows needed for *length* bytes: ``ceil(length / line_width)``."""
    check_line_width(line_width)
    return -(-length // line_width)


def absent_row(offset: int, line_width: int) -> Row:
    return Row(offset=offset, cells=(Absent,) * line_width)


def _make_row(view: memoryview, index: int, line_width: int) -> Row:
    start = index * line_width
    if start >= len(view):
        return absent_row(start, line_width)
    chunk = view[start:start + line_width]
    cells: tuple[Cell, ...] = tuple(chunk.tolist())
    if len(cells) < line_width:
        cells += (Absent,) * (line_width - len(cells))
    return Row(offset=start, cells=cells)


def row_at(buffer: BufferLike, index: int, line_width: int) -> Row:
    """Return row *index* of *buffer*; all-Absent when past its end."""
    check_line_width(line_width)
    if index < 0:
        raise IndexError(f"row index must be non-negative, got {index}")
    return _make_row(_raw(buffer), index, line_width)


def rows(buffer: BufferLike, line_width: int) -> Iterator[Row]:
    """Yield ``ceil(len(buffer) / line_width)`` rows of *buffer*.

    An empty buffer yields nothing. The last row is padded with Absent.
    """
    check_line_width(line_width)
    view = _raw(buffer)
    return (_make_row(view, i, line_width) for i in range(line_count(len(view), line_width)))
