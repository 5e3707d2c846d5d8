"""Per-column comparison of a candidate row against a reference row."""

from __future__ import annotations

from hexen.core.models import DiffMask, Row


class RowLengthMismatch(ValueError):
    """Raised when rows of different widths are compared (a wiring defect)."""


def diff(candidate: Row, reference: Row) -> DiffMask:
    """Return a mask that is True wherever *candidate* differs from *reference*.

    Absent equals Absent and differs from every byte value.
    """
    if len(candidate) != len(reference):
        raise RowLengthMismatch(
            f"cannot compare rows of width {len(candidate)} and {len(reference)}"
        )
    return tuple(c != r for c, r in zip(candidate.cells, reference.cells))


def count_differences(mask: DiffMask) -> int:
    return sum(mask)
