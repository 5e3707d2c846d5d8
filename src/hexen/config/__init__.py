"""Configuration loading, schema, and defaults."""

from hexen.config.loader import ConfigError, load_config, validate
from hexen.config.schema import HexenConfig, OutputConfig, ViewConfig

__all__ = [
    "ConfigError",
    "HexenConfig",
    "OutputConfig",
    "ViewConfig",
    "load_config",
    "validate",
]
