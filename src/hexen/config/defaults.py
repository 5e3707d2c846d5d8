"""Starter .hexen.toml template."""

DEFAULT_TOML = """\
# hexen configuration
version = "1.0"

[view]
line_width = 16           # bytes per row, must be positive
show_ascii = true
# max_lines = 64          # stop after this many lines
# start_offset = 0        # first byte offset to show (rounded down to a line)

[output]
format = "terminal"       # terminal | json
show_summary = true
color = true
"""
