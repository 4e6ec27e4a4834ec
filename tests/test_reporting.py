import json

import yaml
from rich.console import Console

from front_matter_parser.loaders.syntaxes import SYNTAXES
from front_matter_parser.models.parsed_result import ParsedResult
from front_matter_parser.ui.reporting import (
    render_json,
    render_syntaxes,
    render_table,
    render_yaml,
)

PARSED = ParsedResult(front_matter={
    "title": "hello",
    "tags": ["a", "b"]
},
                      content="Body [not markup]")


def _render(renderable) -> str:
	console = Console(record=True, width=100)
	console.print(renderable)
	return console.export_text()


def test_render_json():
	data = json.loads(render_json(PARSED))
	assert data == {
	    "front_matter": {
	        "title": "hello",
	        "tags": ["a", "b"]
	    },
	    "content": "Body [not markup]",
	}


def test_render_json_without_content():
	data = json.loads(render_json(PARSED, include_content=False))
	assert "content" not in data


def test_render_json_dates():
	import datetime

	parsed = ParsedResult(front_matter={"date": datetime.date(2024, 1, 2)})
	assert json.loads(render_json(parsed))["front_matter"] == {
	    "date": "2024-01-02"
	}


def test_render_yaml():
	data = yaml.safe_load(render_yaml(PARSED))
	assert data["front_matter"]["tags"] == ["a", "b"]
	assert data["content"] == "Body [not markup]"


def test_render_table():
	out = _render(render_table(PARSED))
	assert "title" in out
	assert "hello" in out
	assert "Body [not markup]" in out


def test_render_table_empty():
	out = _render(render_table(ParsedResult(), include_content=False))
	assert "(none)" in out
	assert "Content" not in out


def test_render_syntaxes():
	out = _render(render_syntaxes(SYNTAXES))
	assert "slim" in out
	assert "indentation" in out
	assert "<!--" in out
