"""Ordered collection of loaded files."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from hexen.core.models import FileBuffer


class LoadError(Exception):
    """Raised when a file cannot be read in full."""


class FileNotLoaded(KeyError):
    """Raised when removing a file that is not in the collection."""


def _new_id() -> str:
    return uuid.uuid4().hex


def load_file(path: Union[str, Path], name: Optional[str] = None) -> FileBuffer:
    """Read *path* completely and wrap it in a FileBuffer."""
    p = Path(path)
    if p.is_dir():
        raise LoadError(f"{p} is a directory")
    try:
        data = p.read_bytes()
    except FileNotFoundError as exc:
        raise LoadError(f"File not found: {p}") from exc
    except OSError as exc:
        raise LoadError(f"Cannot read {p}: {exc.strerror or exc}") from exc
    return FileBuffer(id=_new_id(), name=name or p.name, data=data)


class FileCollection:
    """The loaded files, in display order. File 0 is the diff reference.

    Usage::

        files = FileCollection()
        files.load(["a.bin", "b.bin"])
        lines = compose(files.snapshot(), 16)
    """

    def __init__(self, files: Iterable[FileBuffer] = ()) -> None:
        self._files: List[FileBuffer] = list(files)

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[FileBuffer]:
        return iter(self._files)

    def __getitem__(self, index: int) -> FileBuffer:
        return self._files[index]

    def add_bytes(self, name: str, data: bytes) -> FileBuffer:
        buf = FileBuffer(id=_new_id(), name=name, data=data)
        self._files.append(buf)
        return buf

    def add(self, files: Iterable[FileBuffer]) -> None:
        self._files.extend(files)

    def load(self, paths: Iterable[Union[str, Path]]) -> List[FileBuffer]:
        """Load every path, then append them all.

        Nothing is appended if any path fails to load.
        """
        loaded = [load_file(p) for p in paths]
        self._files.extend(loaded)
        return loaded

    def remove(self, file_id: str) -> FileBuffer:
        for i, f in enumerate(self._files):
            if f.id == file_id:
                return self._files.pop(i)
        raise FileNotLoaded(file_id)

    def snapshot(self) -> tuple[FileBuffer, ...]:
        return tuple(self._files)

    @property
    def reference(self) -> Optional[FileBuffer]:
        return self._files[0] if self._files else None
