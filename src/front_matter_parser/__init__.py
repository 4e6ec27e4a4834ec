"""
Front Matter Parser - extract YAML front matter from documents.

Finds a ``---`` delimited metadata block at the top of a document,
optionally wrapped in the host format's comment syntax, decodes it and
returns it together with the remaining content.

Main entry points:
    - front_matter_parser.parse: parse a string
    - front_matter_parser.parse_file: parse a file, optionally inferring
      the comment syntax from its extension
    - front_matter_parser.main: CLI entrypoint
"""

from .core.extractor import parse, parse_file
from .errors import (
    ConfigurationError,
    DecodeError,
    FileAccessError,
    FrontMatterError,
    UnknownFormatError,
)
from .loaders.syntaxes import SYNTAXES
from .models.comment_config import CommentConfig
from .models.parsed_result import ParsedResult

__version__ = "0.1.0"

__all__ = [
    "parse",
    "parse_file",
    "CommentConfig",
    "ParsedResult",
    "SYNTAXES",
    "ConfigurationError",
    "DecodeError",
    "FileAccessError",
    "FrontMatterError",
    "UnknownFormatError",
    "__version__",
]
