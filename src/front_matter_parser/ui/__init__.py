"""Output rendering for the command line tool.

Key modules:
    - reporting: JSON, YAML and rich rendering of parse results
"""

from .reporting import render_json, render_yaml, render_table, render_syntaxes

__all__ = [
    "render_json",
    "render_yaml",
    "render_table",
    "render_syntaxes",
]
