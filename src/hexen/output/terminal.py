"""Rich terminal renderer — interleaved hex lines with diff highlighting."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from hexen.core.models import Absent, FileBuffer, RenderLine, RowEntry
from hexen.output.formatting import ascii_char, file_style, format_cell, format_offset, is_printable
from hexen.output.summary import ViewSummary

_DIFF_STYLE = "bold white on red"
_CURSOR_STYLE = "reverse"
_OFFSET_STYLE = "dim"
_NON_PRINTABLE_STYLE = "dim"


def _cursor_column(line: RenderLine, line_width: int, cursor: Optional[int]) -> Optional[int]:
    if cursor is None:
        return None
    if line.offset <= cursor < line.offset + line_width:
        return cursor - line.offset
    return None


def format_entry(
    entry: RowEntry,
    offset: int,
    *,
    show_ascii: bool = True,
    cursor_column: Optional[int] = None,
) -> Text:
    """Build the Rich text for one file's row: offset, hex cells, ASCII."""
    style = file_style(entry.file_index)
    text = Text()
    text.append(format_offset(offset), style=_OFFSET_STYLE)
    text.append(f" {entry.file_index} ", style=f"bold {style}")

    for col, cell in enumerate(entry.row):
        if col:
            text.append(" ")
        cell_style = style
        if entry.mask is not None and entry.mask[col]:
            cell_style = _DIFF_STYLE
        if col == cursor_column:
            cell_style = f"{cell_style} {_CURSOR_STYLE}"
        text.append(format_cell(cell), style=cell_style)

    if show_ascii:
        text.append("  ")
        for cell in entry.row:
            if cell is Absent:
                text.append(ascii_char(cell))
            else:
                text.append(ascii_char(cell), style=style if is_printable(cell) else _NON_PRINTABLE_STYLE)
    return text


def _print_legend(console: Console, files: Sequence[FileBuffer]) -> None:
    table = Table(title="hexen", title_style="bold", border_style="dim")
    table.add_column("#", justify="right")
    table.add_column("File", style="magenta")
    table.add_column("Size", justify="right", style="green")
    for i, f in enumerate(files):
        label = Text(str(i), style=f"bold {file_style(i)}")
        if i == 0:
            label.append(" (ref)", style="dim")
        table.add_row(label, f.name, f"{len(f)} bytes")
    console.print(table)


def _print_summary(console: Console, summary: ViewSummary) -> None:
    console.print()
    console.print(f"[dim]Line width:[/dim]  {summary.line_width}")
    console.print(f"[dim]Lines:[/dim]       {summary.line_count}")
    for stats in summary.files[1:]:
        console.print(
            f"[dim]{stats.name}:[/dim] {stats.differing_bytes} byte(s) differ from reference"
        )
    if summary.identical:
        console.print("[bold green]All files are identical.[/bold green]")


def render(
    lines: Iterable[RenderLine],
    files: Sequence[FileBuffer],
    *,
    line_width: int,
    show_ascii: bool = True,
    cursor: Optional[int] = None,
    summary: Optional[ViewSummary] = None,
    console: Optional[Console] = None,
) -> None:
    """Print the legend, every RenderLine, and the summary if given."""
    console = console or Console()

    if not files:
        console.print("[dim]No files loaded.[/dim]")
        return

    _print_legend(console, files)
    for line in lines:
        col = _cursor_column(line, line_width, cursor)
        for entry in line.entries:
            console.print(
                format_entry(entry, line.offset, show_ascii=show_ascii, cursor_column=col),
                no_wrap=True,
                overflow="ignore",
                crop=False,
            )

    if summary is not None:
        _print_summary(console, summary)
