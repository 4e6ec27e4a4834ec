from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OUTPUT_FORMATS = ("table", "json", "yaml")


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	encoding: str = Field(
	    "utf-8",
	    alias="FRONT_MATTER_ENCODING",
	    description="Text encoding used when reading documents",
	)
	log_level: str = Field(
	    "warning",
	    alias="FRONT_MATTER_LOG_LEVEL",
	    description="Log level for the command line tool",
	)
	autodetect: bool = Field(
	    True,
	    alias="FRONT_MATTER_AUTODETECT",
	    description="Infer comment syntax from the file extension by default",
	)
	output_format: str = Field(
	    "table",
	    alias="FRONT_MATTER_OUTPUT_FORMAT",
	    description="Default output format: table, json or yaml",
	)

	@field_validator("output_format", mode="before")
	@classmethod
	def validate_output_format(cls, v: Any) -> str:
		value = str(v).strip().lower()
		if value not in OUTPUT_FORMATS:
			raise ValueError(
			    f"output_format must be one of {', '.join(OUTPUT_FORMATS)}")
		return value

	@field_validator("encoding")
	@classmethod
	def validate_encoding(cls, v: str) -> str:
		try:
			codecs.lookup(v)
		except LookupError as exc:
			raise ValueError(f"unknown encoding: {v}") from exc
		return v


__all__ = ["Config", "load_env", "OUTPUT_FORMATS"]
