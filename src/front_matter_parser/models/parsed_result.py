"""
Parsed document model.

Holds the outcome of a single parse: the decoded front matter mapping
and the document content that follows it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParsedResult(BaseModel):
	"""Front matter and content extracted from one document.

	The model is frozen and ``front_matter`` is a read-only view over a
	private copy of the decoded mapping. Nested values (lists, mappings)
	are the decoder's own objects and are not copied.
	"""

	model_config = ConfigDict(frozen=True)

	front_matter: Mapping[Any, Any] = Field(
	    default_factory=dict,
	    validate_default=True,
	    description="Decoded front matter mapping")
	content: str = Field(default="",
	                     description="Document text after the front matter")

	@field_validator("front_matter", mode="after")
	@classmethod
	def read_only(cls, v: Mapping[Any, Any]) -> Mapping[Any, Any]:
		return MappingProxyType(dict(v))

	def __getitem__(self, key: str) -> Any:
		return self.front_matter[key]

	@property
	def has_front_matter(self) -> bool:
		"""Return True when a non-empty front matter block was decoded."""
		return bool(self.front_matter)

	def to_dict(self) -> dict[Any, Any]:
		"""
		Return a plain, mutable copy of the front matter.

		Returns:
			New dict with the same top-level keys and values.
		"""
		return dict(self.front_matter)


__all__ = ["ParsedResult"]
