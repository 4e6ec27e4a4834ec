"""Front matter extraction core.

Key modules:
    - locator: Finds the delimited block and unwraps comment syntax
    - extractor: Validation, decoding and the parse entry points
"""

from .locator import locate
from .extractor import decode_front_matter, parse, parse_file, validate_config

__all__ = [
    "locate",
    "decode_front_matter",
    "parse",
    "parse_file",
    "validate_config",
]
