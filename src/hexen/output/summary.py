"""Per-file statistics over a full composition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from hexen.core.composer import compose
from hexen.core.diff import count_differences
from hexen.core.models import FileBuffer


@dataclass
class FileStats:
    index: int
    id: str
    name: str
    size: int
    differing_bytes: int = 0  # always 0 for the reference file


@dataclass
class ViewSummary:
    line_width: int
    line_count: int = 0
    files: List[FileStats] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def identical(self) -> bool:
        return all(f.differing_bytes == 0 for f in self.files)


def summarize(files: Sequence[FileBuffer], line_width: int) -> ViewSummary:
    """Count lines and differing bytes against file 0 across every line."""
    stats = [
        FileStats(index=i, id=f.id, name=f.name, size=len(f))
        for i, f in enumerate(files)
    ]
    summary = ViewSummary(line_width=line_width, files=stats)
    for line in compose(files, line_width):
        summary.line_count += 1
        for entry in line.entries:
            if entry.mask is not None:
                stats[entry.file_index].differing_bytes += count_differences(entry.mask)
    return summary
