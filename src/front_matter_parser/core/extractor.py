"""
Front matter extraction.

Validates the comment configuration, locates the front matter block,
decodes it and assembles the ``ParsedResult``. ``parse`` and
``parse_file`` are the public entry points.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import yaml

from front_matter_parser.core.locator import locate
from front_matter_parser.errors import ConfigurationError
from front_matter_parser.loaders.files import read_document
from front_matter_parser.loaders.syntaxes import config_for_path
from front_matter_parser.models.comment_config import CommentConfig, PLAIN
from front_matter_parser.models.parsed_result import ParsedResult

logger = logging.getLogger(__name__)

Decoder = Callable[[str], Any]


def validate_config(config: CommentConfig) -> None:
	"""
	Check that comment delimiters can be combined.

	Parameters:
		config: Comment configuration to check.

	Raises:
		ConfigurationError: If both ``comment`` and ``start_comment`` are
			set, or ``end_comment`` is set without ``start_comment``.
	"""
	if config.comment and config.start_comment:
		raise ConfigurationError(
		    "comment and start_comment are mutually exclusive")
	if config.end_comment and not config.start_comment:
		raise ConfigurationError("end_comment requires start_comment")


def decode_front_matter(block: str,
                        decoder: Optional[Decoder] = None) -> dict[str, Any]:
	"""
	Decode a located front matter block into a mapping.

	Parameters:
		block: Front matter text without delimiters or comment wrapping.
		decoder: Callable turning text into data; ``yaml.safe_load``
			when None. Its exceptions propagate unchanged.

	Returns:
		Decoded mapping, empty for a blank block.

	Raises:
		yaml.YAMLError: If the block does not decode to a mapping.
	"""
	if not block.strip():
		return {}
	data = (decoder or yaml.safe_load)(block)
	if data is None:
		return {}
	if not isinstance(data, dict):
		raise yaml.YAMLError(
		    f"front matter must be a mapping, got {type(data).__name__}")
	return data


def parse(text: str,
          config: CommentConfig | None = None,
          *,
          decoder: Optional[Decoder] = None) -> ParsedResult:
	"""
	Extract front matter and content from a document.

	Parameters:
		text: The full document.
		config: Comment wrapping of the front matter; plain when None.
		decoder: Optional replacement for the YAML decoder.

	Returns:
		ParsedResult with the decoded front matter and remaining
		content. Documents without a complete block yield empty front
		matter and the whole text as content.

	Raises:
		ConfigurationError: If the comment configuration is invalid.
		yaml.YAMLError: If the front matter is not valid YAML.
	"""
	config = config or PLAIN
	validate_config(config)
	metadata_lines, content_lines = locate(text, config)
	front_matter = decode_front_matter("\n".join(metadata_lines), decoder)
	return ParsedResult(front_matter=front_matter,
	                    content="\n".join(content_lines))


def parse_file(path: str | Path,
               config: CommentConfig | None = None,
               *,
               autodetect: bool | None = None,
               encoding: str = "utf-8",
               decoder: Optional[Decoder] = None) -> ParsedResult:
	"""
	Read a document from disk and extract its front matter.

	Parameters:
		path: Path to the document.
		config: Comment wrapping of the front matter; plain when None and
			autodetection is off.
		autodetect: Infer the comment wrapping from the file extension.
			When None, autodetection applies unless ``config`` is given.
		encoding: Text encoding of the file.
		decoder: Optional replacement for the YAML decoder.

	Returns:
		ParsedResult for the file content.

	Raises:
		ConfigurationError: If the configuration is invalid, or given
			together with ``autodetect``.
		UnknownFormatError: If autodetection finds no syntax for the
			extension.
		FileAccessError: If the file cannot be read.
	"""
	if autodetect is None:
		autodetect = config is None
	if autodetect:
		if config is not None:
			raise ConfigurationError(
			    "pass either an explicit config or autodetect, not both")
		config = config_for_path(path)
	else:
		validate_config(config or PLAIN)
	text = read_document(path, encoding=encoding)
	logger.debug("parsing %s (%d chars)", path, len(text))
	return parse(text, config, decoder=decoder)


__all__ = ["Decoder", "decode_front_matter", "parse", "parse_file",
           "validate_config"]
