"""
Document file reading.
"""

from __future__ import annotations

from pathlib import Path

from front_matter_parser.errors import FileAccessError


def read_document(path: str | Path, encoding: str = "utf-8") -> str:
	"""
	Read a document's full text in a single read.

	Line endings are left untouched so content round-trips exactly.

	Parameters:
		path: Path to the document.
		encoding: Text encoding of the file.

	Returns:
		The file content.

	Raises:
		FileAccessError: If the path cannot be read or decoded.
	"""
	p = Path(path)
	try:
		with p.open("r", encoding=encoding, newline="") as fh:
			return fh.read()
	except (OSError, UnicodeDecodeError) as exc:
		raise FileAccessError(p, f"Cannot read {p}: {exc}") from exc


__all__ = ["read_document"]
