"""Data models for the interleaved hex view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union


class _AbsentType(Enum):
    """Marker for a position past the end of a buffer."""

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "Absent"


Absent = _AbsentType.ABSENT

Cell = Union[int, _AbsentType]
DiffMask = Tuple[bool, ...]


@dataclass(frozen=True, slots=True)
class FileBuffer:
    """A loaded file: identifier, display name, and its raw bytes."""

    id: str
    name: str
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class Row:
    """One fixed-width line of a buffer, starting at *offset*."""

    offset: int
    cells: Tuple[Cell, ...]

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def present(self) -> bytes:
        """Return the non-absent cells as bytes."""
        return bytes(c for c in self.cells if c is not Absent)


@dataclass(frozen=True, slots=True)
class RowEntry:
    """A single file's row within a RenderLine."""

    file_index: int
    file: FileBuffer
    row: Row
    mask: Optional[DiffMask] = None  # None for the reference file

    @property
    def is_reference(self) -> bool:
        return self.file_index == 0


@dataclass(frozen=True, slots=True)
class RenderLine:
    """One line offset with one row per loaded file, in file-list order."""

    index: int
    offset: int
    entries: Tuple[RowEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RowEntry]:
        return iter(self.entries)
