"""Core — byte grid, row diffing, and interleaved composition."""

from hexen.core.composer import compose, compose_window, line_for_offset, shared_line_count
from hexen.core.diff import RowLengthMismatch, count_differences, diff
from hexen.core.grid import absent_row, line_count, row_at, rows
from hexen.core.models import Absent, Cell, DiffMask, FileBuffer, RenderLine, Row, RowEntry

__all__ = [
    "Absent",
    "Cell",
    "DiffMask",
    "FileBuffer",
    "RenderLine",
    "Row",
    "RowEntry",
    "RowLengthMismatch",
    "absent_row",
    "compose",
    "compose_window",
    "count_differences",
    "diff",
    "line_count",
    "line_for_offset",
    "row_at",
    "rows",
    "shared_line_count",
]
