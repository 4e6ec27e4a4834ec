from pathlib import Path

import pytest

from front_matter_parser import (
    CommentConfig,
    ConfigurationError,
    FileAccessError,
    UnknownFormatError,
    parse_file,
)
from front_matter_parser.models.parsed_result import ParsedResult

FIXTURES = {
    "slim": "/\n  ---\n  title: hello\n  ---\nh1 Content\n",
    "coffee": "# ---\n# title: hello\n# ---\nalert 'Content'\n",
    "html": "<!--\n---\ntitle: hello\n---\n-->\n<p>Content</p>\n",
    "haml": "-#\n  ---\n  title: hello\n  ---\n%p Content\n",
    "liquid":
        "<% comment %>\n---\ntitle: hello\n---\n<% endcomment %>\nContent\n",
    "sass": "// ---\n// title: hello\n// ---\n.a\n  color: red\n",
    "scss": "// ---\n// title: hello\n// ---\n.a { color: red; }\n",
    "md": "---\ntitle: hello\n---\n# Content\n",
}

EXPECTED_CONFIGS = {
    "slim": (None, "/", None),
    "coffee": ("#", None, None),
    "html": (None, "<!--", "-->"),
    "haml": (None, "-#", None),
    "liquid": (None, "<% comment %>", "<% endcomment %>"),
    "sass": ("//", None, None),
    "scss": ("//", None, None),
    "md": (None, None, None),
}


def _write(tmp_path: Path, ext: str) -> Path:
	p = tmp_path / f"example.{ext}"
	p.write_text(FIXTURES[ext], encoding="utf-8")
	return p


@pytest.mark.parametrize("ext", sorted(FIXTURES))
def test_autodetect_passes_detected_config(tmp_path, monkeypatch, ext):
	"""Autodetection hands the file text and format syntax to parse()."""
	seen = {}

	def fake_parse(text, config=None, *, decoder=None):
		seen["text"] = text
		seen["config"] = config
		return ParsedResult()

	monkeypatch.setattr("front_matter_parser.core.extractor.parse",
	                    fake_parse)
	path = _write(tmp_path, ext)
	parse_file(path, autodetect=True)
	assert seen["text"] == FIXTURES[ext]
	cfg = seen["config"]
	assert (cfg.comment, cfg.start_comment,
	        cfg.end_comment) == EXPECTED_CONFIGS[ext]


@pytest.mark.parametrize("ext", sorted(FIXTURES))
def test_autodetect_extracts_front_matter(tmp_path, ext):
	parsed = parse_file(_write(tmp_path, ext), autodetect=True)
	assert parsed.front_matter == {"title": "hello"}
	assert "Content" in parsed.content or "color" in parsed.content


def test_autodetect_unknown_extension(tmp_path):
	p = tmp_path / "example.foo"
	p.write_text("---\ntitle: hello\n---\n", encoding="utf-8")
	with pytest.raises(UnknownFormatError) as exc_info:
		parse_file(p, autodetect=True)
	assert exc_info.value.extension == "foo"


def test_unknown_format_is_runtime_error(tmp_path):
	with pytest.raises(RuntimeError):
		parse_file(tmp_path / "example", autodetect=True)


def test_without_autodetect_uses_given_config(tmp_path, monkeypatch):
	seen = {}

	def fake_parse(text, config=None, *, decoder=None):
		seen["text"] = text
		seen["config"] = config
		return ParsedResult()

	monkeypatch.setattr("front_matter_parser.core.extractor.parse",
	                    fake_parse)
	path = _write(tmp_path, "md")
	parse_file(path, autodetect=False)
	assert seen["text"] == FIXTURES["md"]
	assert seen["config"] is None


def test_explicit_config(tmp_path):
	p = tmp_path / "notes.txt"
	p.write_text("; ---\n; title: hello\n; ---\nbody", encoding="utf-8")
	parsed = parse_file(p, CommentConfig(comment=";"))
	assert parsed.front_matter == {"title": "hello"}
	assert parsed.content == "body"


def test_config_and_autodetect_conflict(tmp_path):
	path = _write(tmp_path, "md")
	with pytest.raises(ConfigurationError):
		parse_file(path, CommentConfig(comment="#"), autodetect=True)


def test_invalid_config_checked_before_reading(tmp_path):
	with pytest.raises(ConfigurationError):
		parse_file(tmp_path / "missing.md",
		           CommentConfig(comment="#", start_comment="/"))


def test_missing_file(tmp_path):
	with pytest.raises(FileAccessError) as exc_info:
		parse_file(tmp_path / "missing.md")
	assert exc_info.value.path == tmp_path / "missing.md"
	assert isinstance(exc_info.value, OSError)


def test_undecodable_file(tmp_path):
	p = tmp_path / "latin.md"
	p.write_bytes(b"---\ntitle: caf\xe9\n---\n")
	with pytest.raises(FileAccessError):
		parse_file(p)
	parsed = parse_file(p, encoding="latin-1")
	assert parsed.front_matter == {"title": "caf\xe9"}


def test_line_endings_preserved(tmp_path):
	p = tmp_path / "crlf.md"
	p.write_bytes(b"---\r\ntitle: hello\r\n---\r\nContent\r\n")
	parsed = parse_file(p)
	assert parsed.content == "Content\r\n"


def test_autodetects_by_default(tmp_path):
	p = tmp_path / "example.html"
	p.write_text("<!--\n---\ntitle: hello\n---\n-->\nContent", encoding="utf-8")
	parsed = parse_file(p)
	assert parsed.front_matter == {"title": "hello"}
	assert parsed.content == "Content"


def test_default_autodetect_rejects_unknown_extension(tmp_path):
	p = tmp_path / "notes.txt"
	p.write_text("---\ntitle: hello\n---\n", encoding="utf-8")
	with pytest.raises(UnknownFormatError):
		parse_file(p)


def test_explicit_config_disables_autodetect(tmp_path):
	p = tmp_path / "example.html"
	p.write_text("# ---\n# title: hello\n# ---\nContent", encoding="utf-8")
	parsed = parse_file(p, CommentConfig(comment="#"))
	assert parsed.front_matter == {"title": "hello"}


def test_autodetect_false_parses_plain(tmp_path):
	text = "<!--\n---\ntitle: hello\n---\n-->\nContent"
	p = tmp_path / "example.html"
	p.write_text(text, encoding="utf-8")
	parsed = parse_file(p, autodetect=False)
	assert parsed.front_matter == {}
	assert parsed.content == text


def test_byte_order_mark(tmp_path):
	p = tmp_path / "bom.md"
	p.write_bytes(b"\xef\xbb\xbf---\ntitle: hello\n---\nContent")
	parsed = parse_file(p)
	assert parsed.front_matter == {"title": "hello"}
	assert parsed.content == "Content"
