"""
Comment configuration model.

Describes how a front matter block is wrapped in the host format's
comment syntax. The three fields form a small closed set of variants
exposed through ``CommentConfig.mode``.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

CommentMode = Literal["plain", "single_line", "multi_line", "indentation"]


class CommentConfig(BaseModel):
	"""Comment delimiters wrapping a front matter block.

	Attributes:
		comment: Single-line comment prefix (e.g. ``#`` or ``//``).
		start_comment: Multi-line comment opening marker (e.g. ``<!--``).
		end_comment: Multi-line comment closing marker (e.g. ``-->``).
			When absent with ``start_comment`` set, the comment is
			closed by indentation.
	"""

	model_config = ConfigDict(frozen=True)

	comment: Optional[str] = Field(default=None,
	                               description="Single-line comment prefix")
	start_comment: Optional[str] = Field(
	    default=None, description="Multi-line comment opening marker")
	end_comment: Optional[str] = Field(
	    default=None, description="Multi-line comment closing marker")

	@field_validator("comment", "start_comment", "end_comment", mode="before")
	@classmethod
	def blank_to_none(cls, v: Any) -> Any:
		"""Treat empty or whitespace-only markers as absent."""
		if isinstance(v, str):
			v = v.strip()
			return v or None
		return v

	@property
	def mode(self) -> CommentMode:
		"""Return the wrapping variant these delimiters describe."""
		if self.comment:
			return "single_line"
		if self.start_comment and self.end_comment:
			return "multi_line"
		if self.start_comment:
			return "indentation"
		return "plain"


PLAIN = CommentConfig()

__all__ = ["CommentConfig", "CommentMode", "PLAIN"]
