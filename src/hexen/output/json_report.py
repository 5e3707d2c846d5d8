"""JSON reporter — the render model as machine-readable output."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence

from hexen.core.models import Absent, FileBuffer, RenderLine
from hexen.output.summary import ViewSummary


def line_to_dict(line: RenderLine) -> Dict[str, Any]:
    """Absent cells become ``null``; the reference row has ``"diff": null``."""
    return {
        "offset": line.offset,
        "rows": [
            {
                "file": entry.file.id,
                "bytes": [None if c is Absent else c for c in entry.row],
                "diff": list(entry.mask) if entry.mask is not None else None,
            }
            for entry in line.entries
        ],
    }


def summary_to_dict(summary: ViewSummary) -> Dict[str, Any]:
    return {
        "line_count": summary.line_count,
        "identical": summary.identical,
        "differing_bytes": {s.id: s.differing_bytes for s in summary.files[1:]},
        "duration_ms": summary.duration_ms,
    }


def to_dict(
    lines: Iterable[RenderLine],
    files: Sequence[FileBuffer],
    *,
    line_width: int,
    summary: Optional[ViewSummary] = None,
) -> Dict[str, Any]:
    """Convert a composition to a JSON-serialisable dict."""
    files_list: List[Dict[str, Any]] = [
        {"id": f.id, "name": f.name, "size": len(f)} for f in files
    ]
    out: Dict[str, Any] = {
        "version": "1.0",
        "line_width": line_width,
        "files": files_list,
        "lines": [line_to_dict(line) for line in lines],
    }
    if summary is not None:
        out["summary"] = summary_to_dict(summary)
    return out


def render(
    lines: Iterable[RenderLine],
    files: Sequence[FileBuffer],
    *,
    line_width: int,
    summary: Optional[ViewSummary] = None,
) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(lines, files, line_width=line_width, summary=summary), indent=2)
