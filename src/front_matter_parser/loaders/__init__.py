"""Document and syntax loading.

Key modules:
    - files: Reading documents from disk
    - syntaxes: Extension to comment syntax lookup
"""

from .files import read_document
from .syntaxes import SYNTAXES, config_for_extension, config_for_path

__all__ = [
    "read_document",
    "SYNTAXES",
    "config_for_extension",
    "config_for_path",
]
