"""
Exception hierarchy.

All errors raised by the library derive from ``FrontMatterError`` and
also from the closest builtin, so callers can catch either.
"""

from __future__ import annotations

from pathlib import Path

import yaml

# Decoder failures are PyYAML's own errors, propagated unchanged.
DecodeError = yaml.YAMLError


class FrontMatterError(Exception):
	"""Base exception for all front matter parser errors."""


class ConfigurationError(FrontMatterError, ValueError):
	"""Raised when a comment configuration combines incompatible markers."""


class UnknownFormatError(FrontMatterError, RuntimeError):
	"""Raised when autodetection finds no syntax for a file extension."""

	def __init__(self, extension: str, message: str | None = None) -> None:
		detail = message or (
		    f"No comment syntax registered for extension '{extension}'")
		super().__init__(detail)
		self.extension = extension


class FileAccessError(FrontMatterError, OSError):
	"""Raised when a document cannot be read from disk."""

	def __init__(self, path: str | Path, message: str | None = None) -> None:
		detail = message or f"Cannot read {path}"
		super().__init__(detail)
		self.path = Path(path)


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "FileAccessError",
    "FrontMatterError",
    "UnknownFormatError",
]
