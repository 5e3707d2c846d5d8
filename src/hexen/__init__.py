"""hexen — a small multi-file hex viewer."""

__version__ = "0.1.0"
