"""
Comment syntax lookup by file extension.

Maps lowercase file extensions to the ``CommentConfig`` used by that
format. The table is immutable and built once at import time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from front_matter_parser.errors import UnknownFormatError
from front_matter_parser.models.comment_config import CommentConfig

logger = logging.getLogger(__name__)

_HTML = CommentConfig(start_comment="<!--", end_comment="-->")
_MARKDOWN = CommentConfig()

SYNTAXES: Mapping[str, CommentConfig] = MappingProxyType({
    "slim": CommentConfig(start_comment="/"),
    "haml": CommentConfig(start_comment="-#"),
    "coffee": CommentConfig(comment="#"),
    "sass": CommentConfig(comment="//"),
    "scss": CommentConfig(comment="//"),
    "html": _HTML,
    "htm": _HTML,
    "liquid": CommentConfig(start_comment="<% comment %>",
                            end_comment="<% endcomment %>"),
    "erb": CommentConfig(start_comment="<%#", end_comment="%>"),
    "md": _MARKDOWN,
    "markdown": _MARKDOWN,
})


def config_for_extension(extension: str) -> CommentConfig:
	"""
	Return the comment syntax registered for a file extension.

	Parameters:
		extension: Extension with or without the leading dot; matched
			case-insensitively.

	Returns:
		The registered CommentConfig.

	Raises:
		UnknownFormatError: If the extension is not registered.
	"""
	key = extension.lower().lstrip(".")
	try:
		return SYNTAXES[key]
	except KeyError:
		raise UnknownFormatError(key) from None


def config_for_path(path: str | Path) -> CommentConfig:
	"""
	Infer the comment syntax of a file from its extension.

	Parameters:
		path: File path whose last suffix selects the syntax.

	Returns:
		The registered CommentConfig.

	Raises:
		UnknownFormatError: If the file has no registered extension.
	"""
	config = config_for_extension(Path(path).suffix)
	logger.debug("autodetected %s syntax for %s", config.mode, path)
	return config


__all__ = ["SYNTAXES", "config_for_extension", "config_for_path"]
