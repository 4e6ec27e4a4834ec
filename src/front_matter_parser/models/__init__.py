"""Data models.

Key modules:
    - comment_config: Comment delimiters wrapping a front matter block
    - parsed_result: Result of a parse
    - config: Runtime settings loaded from the environment
"""

from .comment_config import CommentConfig, CommentMode, PLAIN
from .parsed_result import ParsedResult
from .config import Config, load_env

__all__ = [
    "CommentConfig",
    "CommentMode",
    "PLAIN",
    "ParsedResult",
    "Config",
    "load_env",
]
