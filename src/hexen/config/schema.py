"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")

DEFAULT_LINE_WIDTH = 16


@dataclass
class ViewConfig:
    line_width: int = DEFAULT_LINE_WIDTH  # bytes per row
    show_ascii: bool = True
    max_lines: Optional[int] = None  # None = render every line
    start_offset: int = 0


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    color: bool = True


@dataclass
class HexenConfig:
    version: str = "1.0"
    view: ViewConfig = field(default_factory=ViewConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
