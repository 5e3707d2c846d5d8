"""Cell formatting shared by every reporter."""

from __future__ import annotations

from hexen.core.models import Absent, Cell

ABSENT_HEX = "  "
ABSENT_ASCII = " "
NON_PRINTABLE = "."

# One style per file, cycling when more files are loaded.
FILE_STYLES: tuple[str, ...] = (
    "white",
    "cyan",
    "magenta",
    "green",
    "yellow",
    "blue",
    "bright_cyan",
    "bright_magenta",
    "bright_green",
    "bright_yellow",
)


def format_offset(offset: int) -> str:
    """Hex offset, zero-padded to at least four digits."""
    return f"{offset:04x}"


def format_cell(cell: Cell) -> str:
    if cell is Absent:
        return ABSENT_HEX
    return f"{cell:02x}"


def is_printable(cell: Cell) -> bool:
    return cell is not Absent and 0x20 <= cell < 0x7F


def ascii_char(cell: Cell) -> str:
    if cell is Absent:
        return ABSENT_ASCII
    if is_printable(cell):
        return chr(cell)
    return NON_PRINTABLE


def file_style(file_index: int) -> str:
    return FILE_STYLES[file_index % len(FILE_STYLES)]
