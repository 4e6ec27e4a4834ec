"""
Front matter block locator.

Finds the ``---`` delimited block inside a document, unwrapping the
comment syntax described by a ``CommentConfig``. Works on the list of
lines produced by a single split so indentation and comment handling
stay in one place. Decoding the block is left to the caller.
"""

from __future__ import annotations

import logging
import textwrap
from typing import Optional

from front_matter_parser.models.comment_config import CommentConfig, PLAIN

logger = logging.getLogger(__name__)

MARKER = "---"
BOM = "\ufeff"


def _indentation(line: str) -> str:
	"""Return the leading whitespace of a line."""
	return line[:len(line) - len(line.lstrip())]


def _strip_comment(line: str, comment: str) -> Optional[str]:
	"""
	Remove a single-line comment prefix, keeping leading indentation.

	Parameters:
		line: Raw document line.
		comment: Comment prefix such as ``#``.

	Returns:
		The line without its prefix, or None when the line is not
		commented.
	"""
	stripped = line.lstrip()
	if not stripped.startswith(comment):
		return None
	return _indentation(line) + stripped[len(comment):]


def _is_marker(line: str, comment: Optional[str] = None) -> bool:
	if comment:
		view = _strip_comment(line, comment)
		if view is None:
			return False
		line = view
	return line.strip() == MARKER


def _find_markers(lines: list[str],
                  comment: Optional[str] = None) -> Optional[tuple[int, int]]:
	"""
	Find the opening and closing marker lines.

	Only blank lines may precede the opening marker. A lone opening
	marker does not make a block.

	Parameters:
		lines: Working line set to scan.
		comment: Single-line comment prefix markers must carry, if any.

	Returns:
		Indexes of the opening and closing markers, or None.
	"""
	opening = None
	for idx, line in enumerate(lines):
		if _is_marker(line, comment):
			opening = idx
			break
		if line.strip():
			return None
	if opening is None:
		return None
	for idx in range(opening + 1, len(lines)):
		if _is_marker(lines[idx], comment):
			return opening, idx
	logger.debug("opening marker on line %d is never closed", opening + 1)
	return None


def _comment_region(lines: list[str],
                    config: CommentConfig) -> Optional[tuple[int, int, int]]:
	"""
	Locate the multi-line comment that wraps the front matter.

	The comment is closed either by a line equal to ``end_comment`` or,
	when no end marker is configured, by the first non-blank line
	indented no deeper than the opening marker.

	Parameters:
		lines: All document lines.
		config: Multi-line comment configuration.

	Returns:
		Tuple of (body start, body end, content start) indexes, or None
		when no complete comment opens the document.
	"""
	start = None
	for idx, line in enumerate(lines):
		if line.strip() == config.start_comment:
			start = idx
			break
		if line.strip():
			return None
	if start is None:
		return None

	if config.end_comment:
		for idx in range(start + 1, len(lines)):
			if lines[idx].strip() == config.end_comment:
				return start + 1, idx, idx + 1
		logger.debug("comment opened on line %d has no '%s'", start + 1,
		             config.end_comment)
		return None

	depth = len(_indentation(lines[start]))
	for idx in range(start + 1, len(lines)):
		line = lines[idx]
		if line.strip() and len(_indentation(line)) <= depth:
			return start + 1, idx, idx
	return start + 1, len(lines), len(lines)


def _normalize(lines: list[str], comment: Optional[str]) -> list[str]:
	"""Strip comment prefixes and the common indentation of a block."""
	if comment:
		views = []
		for line in lines:
			view = _strip_comment(line, comment)
			views.append(line if view is None else view)
		lines = views
	return textwrap.dedent("\n".join(lines)).split("\n")


def locate(text: str,
           config: CommentConfig | None = None) -> tuple[list[str], list[str]]:
	"""
	Split a document into front matter lines and content lines.

	Parameters:
		text: The full document.
		config: Comment wrapping of the front matter; plain when None.

	Returns:
		Tuple of (metadata lines, content lines). Metadata lines have
		comment wrapping and common indentation removed; content lines
		are verbatim. A leading byte order mark does not hide the
		opening marker. When no block is found the metadata is empty and
		the content is every line of ``text``, unchanged.
	"""
	config = config or PLAIN
	original = text.split("\n")
	lines = original
	if text.startswith(BOM):
		lines = [original[0][len(BOM):]] + original[1:]

	content_start: Optional[int] = None
	body = lines
	offset = 0
	if config.mode in ("multi_line", "indentation"):
		region = _comment_region(lines, config)
		if region is None:
			return [], original
		offset, body_end, content_start = region
		body = lines[offset:body_end]

	comment = config.comment if config.mode == "single_line" else None
	markers = _find_markers(body, comment)
	if markers is None:
		return [], original
	opening, closing = markers
	logger.debug("front matter markers on lines %d and %d",
	             offset + opening + 1, offset + closing + 1)

	metadata = _normalize(body[opening + 1:closing], comment)
	if content_start is None:
		content_start = offset + closing + 1
	return metadata, lines[content_start:]


__all__ = ["locate", "MARKER"]
