"""Load and merge configuration from .hexen.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from hexen.config.schema import OUTPUT_FORMATS, HexenConfig, OutputConfig, ViewConfig

CONFIG_FILENAME = ".hexen.toml"


class ConfigError(Exception):
    """Raised when config is malformed, unreadable, or invalid."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in raw.items() if k in valid_fields})


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _positive_int(value: Any) -> bool:
    return _is_int(value) and value > 0


def _non_negative_int(value: Any) -> bool:
    return _is_int(value) and value >= 0


def validate(cfg: HexenConfig) -> None:
    """Raise ConfigError on values the viewer cannot work with."""
    if not _positive_int(cfg.view.line_width):
        raise ConfigError(f"view.line_width must be a positive integer, got {cfg.view.line_width!r}")
    if cfg.view.max_lines is not None and not _non_negative_int(cfg.view.max_lines):
        raise ConfigError(f"view.max_lines must be a non-negative integer, got {cfg.view.max_lines!r}")
    if not _non_negative_int(cfg.view.start_offset):
        raise ConfigError(
            f"view.start_offset must be a non-negative integer, got {cfg.view.start_offset!r}"
        )
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {cfg.output.format!r}"
        )


def _merge_env_overrides(cfg: HexenConfig) -> None:
    """Apply HEXEN_* environment variable overrides. Invalid values are ignored."""
    if val := os.environ.get("HEXEN_LINE_WIDTH"):
        try:
            width = int(val)
        except ValueError:
            width = 0
        if width > 0:
            cfg.view.line_width = width
    if val := os.environ.get("HEXEN_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if os.environ.get("HEXEN_NO_COLOR") == "1" or os.environ.get("NO_COLOR"):
        cfg.output.color = False


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> HexenConfig:
    """Load, validate, and return a HexenConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = HexenConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = HexenConfig(
                version=str(raw.get("version", "1.0")),
                view=_build_section(raw, ViewConfig, "view"),
                output=_build_section(raw, OutputConfig, "output"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
        validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
