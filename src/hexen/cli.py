"""hexen CLI — Typer application with view and init commands."""

from __future__ import annotations

import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from hexen import __version__

app = typer.Typer(
    name="hexen",
    help="A small multi-file hex viewer.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


# ── view ──────────────────────────────────────────────────────────────────────


@app.command()
def view(
    files: List[Path] = typer.Argument(..., help="Files to show; the first one is the diff reference"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Bytes per line"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    cursor: Optional[int] = typer.Option(None, "--cursor", help="Byte position to highlight"),
    start: Optional[int] = typer.Option(None, "--start", help="First byte offset to show"),
    lines: Optional[int] = typer.Option(None, "--lines", "-n", help="Maximum number of lines to show"),
    no_ascii: bool = typer.Option(False, "--no-ascii", help="Hide the ASCII column"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .hexen.toml"),
    fail_on_diff: bool = typer.Option(False, "--fail-on-diff", help="Exit 1 if any file differs from the first"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Show FILES as interleaved hex dumps, highlighting bytes that differ from the first."""
    from hexen.config.loader import ConfigError, load_config, validate
    from hexen.core.composer import compose_window, line_for_offset
    from hexen.files.collection import FileCollection, LoadError
    from hexen.output import json_report, terminal
    from hexen.output.summary import ViewSummary, summarize

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if width is not None:
        cfg.view.line_width = width
    if format is not None:
        cfg.output.format = format  # type: ignore[assignment]
    if start is not None:
        cfg.view.start_offset = start
    if lines is not None:
        cfg.view.max_lines = lines
    if no_ascii:
        cfg.view.show_ascii = False
    if cursor is not None and cursor < 0:
        console.print(f"[bold red]Invalid cursor:[/bold red] {cursor}")
        raise typer.Exit(code=2)

    try:
        validate(cfg)
    except ConfigError as exc:
        console.print(f"[bold red]Invalid option:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- Load files ---
    collection = FileCollection()
    try:
        collection.load(files)
    except LoadError as exc:
        console.print(f"[bold red]Load error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    snapshot = collection.snapshot()
    line_width = cfg.view.line_width

    if verbose or debug:
        console.print(f"[dim]Line width: {line_width}[/dim]")
        for i, f in enumerate(snapshot):
            console.print(f"[dim]File {i}: {f.name} ({len(f)} bytes)[/dim]")

    # --- Summary (full pass, only when something uses it) ---
    summary: Optional[ViewSummary] = None
    if cfg.output.show_summary or fail_on_diff:
        started = time.perf_counter()
        summary = summarize(snapshot, line_width)
        summary.duration_ms = (time.perf_counter() - started) * 1000
        if debug:
            console.print(f"[dim]Composed {summary.line_count} lines in {summary.duration_ms:.0f}ms[/dim]")

    start_line = line_for_offset(cfg.view.start_offset, line_width)

    def window():
        return compose_window(snapshot, line_width, start_line, cfg.view.max_lines)

    # --- Output ---
    report_text: Optional[str] = None
    shown_summary = summary if cfg.output.show_summary else None

    if cfg.output.format == "terminal":
        terminal.render(
            window(),
            snapshot,
            line_width=line_width,
            show_ascii=cfg.view.show_ascii,
            cursor=cursor,
            summary=shown_summary,
            console=Console(no_color=not cfg.output.color, highlight=False),
        )
    else:
        report_text = json_report.render(window(), snapshot, line_width=line_width, summary=shown_summary)
        print(report_text)

    # --- Write to file ---
    if output:
        if report_text is None:
            report_text = json_report.render(window(), snapshot, line_width=line_width, summary=shown_summary)
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    # --- Exit code ---
    if fail_on_diff and summary is not None and not summary.identical:
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .hexen.toml in the current directory."""
    from hexen.config.defaults import DEFAULT_TOML
    from hexen.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"hexen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """hexen — a small multi-file hex viewer."""
