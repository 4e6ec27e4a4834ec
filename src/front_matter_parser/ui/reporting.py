"""
Parsed result rendering.

Renders a ParsedResult as a rich table, JSON or YAML for the command
line tool, and the syntax table as a rich table.
"""

from __future__ import annotations

import json
from typing import Mapping

import yaml
from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from front_matter_parser.models.comment_config import CommentConfig
from front_matter_parser.models.parsed_result import ParsedResult


def render_json(parsed: ParsedResult, include_content: bool = True) -> str:
	"""
	Render a parsed document as a JSON object.

	Values JSON cannot represent (dates, for instance) are rendered with
	``str``.

	Parameters:
		parsed: The parse result.
		include_content: Whether to include the content field.

	Returns:
		Indented JSON text.
	"""
	data: dict = {"front_matter": parsed.to_dict()}
	if include_content:
		data["content"] = parsed.content
	return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def render_yaml(parsed: ParsedResult, include_content: bool = True) -> str:
	"""Render a parsed document as a YAML mapping."""
	data: dict = {"front_matter": parsed.to_dict()}
	if include_content:
		data["content"] = parsed.content
	return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def _format_value(value: object) -> str:
	if isinstance(value, (dict, list)):
		return yaml.safe_dump(value, sort_keys=False,
		                      default_flow_style=True).strip()
	return str(value)


def render_table(parsed: ParsedResult, include_content: bool = True) -> Group:
	"""
	Render a parsed document as a rich renderable.

	Parameters:
		parsed: The parse result.
		include_content: Whether to show the content below the table.

	Returns:
		Group with a key/value table and, optionally, a content panel.
	"""
	table = Table(title="Front matter", box=box.ROUNDED, expand=True,
	              show_header=True)
	table.add_column("Key", style="bold")
	table.add_column("Value")
	if parsed.front_matter:
		for key, value in parsed.front_matter.items():
			table.add_row(Text(str(key)), Text(_format_value(value)))
	else:
		table.add_row(Text("(none)", style="dim"), "")
	parts: list = [table]
	if include_content:
		parts.append(
		    Panel(Text(parsed.content), title="Content", box=box.ROUNDED))
	return Group(*parts)


def render_syntaxes(syntaxes: Mapping[str, CommentConfig]) -> Table:
	"""Render the extension to comment syntax table."""
	table = Table(box=box.ROUNDED, show_header=True)
	table.add_column("Extension", style="bold")
	table.add_column("Mode")
	table.add_column("Comment")
	table.add_column("Start comment")
	table.add_column("End comment")
	for ext in sorted(syntaxes):
		cfg = syntaxes[ext]
		table.add_row(ext, cfg.mode, cfg.comment or "", cfg.start_comment
		              or "", cfg.end_comment or "")
	return table


__all__ = ["render_json", "render_yaml", "render_table", "render_syntaxes"]
