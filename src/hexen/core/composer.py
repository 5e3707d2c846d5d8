"""Interleaved composer — one row per file for every line offset.

File 0 is the reference: every other file's row carries a DiffMask against
file 0's row at the same line. Files shorter than the longest one are
padded with all-Absent rows so every line has exactly ``len(files)`` rows.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from hexen.core.diff import diff
from hexen.core.grid import check_line_width, line_count, row_at
from hexen.core.models import FileBuffer, RenderLine, RowEntry


def shared_line_count(files: Sequence[FileBuffer], line_width: int) -> int:
    """Line count of the longest file (0 when *files* is empty)."""
    check_line_width(line_width)
    if not files:
        return 0
    return line_count(max(len(f) for f in files), line_width)


def line_for_offset(position: int, line_width: int) -> int:
    """Line index holding byte *position*."""
    check_line_width(line_width)
    if position < 0:
        raise ValueError(f"position must be non-negative, got {position}")
    return position // line_width


def _compose_line(files: Sequence[FileBuffer], index: int, line_width: int) -> RenderLine:
    reference = row_at(files[0], index, line_width)
    entries: List[RowEntry] = [RowEntry(file_index=0, file=files[0], row=reference)]
    for j in range(1, len(files)):
        row = row_at(files[j], index, line_width)
        entries.append(
            RowEntry(file_index=j, file=files[j], row=row, mask=diff(row, reference))
        )
    return RenderLine(index=index, offset=index * line_width, entries=tuple(entries))


def _generate(
    files: Sequence[FileBuffer], line_width: int, start: int, stop: int
) -> Iterator[RenderLine]:
    for i in range(start, stop):
        yield _compose_line(files, i, line_width)


def compose(files: Sequence[FileBuffer], line_width: int) -> Iterator[RenderLine]:
    """Yield every RenderLine for *files*, ordered by line then file order.

    Stateless: each call recomputes from the given snapshot. The line width
    is validated before the first line is produced.
    """
    files = tuple(files)
    total = shared_line_count(files, line_width)
    return _generate(files, line_width, 0, total)


def compose_window(
    files: Sequence[FileBuffer],
    line_width: int,
    start_line: int = 0,
    max_lines: Optional[int] = None,
) -> Iterator[RenderLine]:
    """Yield the RenderLines in ``[start_line, start_line + max_lines)``.

    Lines past the end are not produced; *max_lines* of None means
    "to the end".
    """
    if start_line < 0:
        raise ValueError(f"start line must be non-negative, got {start_line}")
    if max_lines is not None and max_lines < 0:
        raise ValueError(f"max lines must be non-negative, got {max_lines}")
    files = tuple(files)
    total = shared_line_count(files, line_width)
    stop = total if max_lines is None else min(total, start_line + max_lines)
    return _generate(files, line_width, min(start_line, total), stop)
