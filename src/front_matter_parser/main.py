from __future__ import annotations

import sys
from pathlib import Path

import typer
import yaml
from rich.console import Console
from typer.main import get_command

from front_matter_parser.core.extractor import parse_file
from front_matter_parser.errors import FrontMatterError
from front_matter_parser.loaders.syntaxes import SYNTAXES
from front_matter_parser.models.comment_config import CommentConfig
from front_matter_parser.models.config import OUTPUT_FORMATS, Config, load_env
from front_matter_parser.ui.reporting import (
    render_json,
    render_syntaxes,
    render_table,
    render_yaml,
)
from front_matter_parser.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

cli = typer.Typer(add_completion=False, no_args_is_help=True)


@cli.callback()
def root() -> None:
	"""
	Extract YAML front matter from documents.
	"""
	return None


def parse_impl(
    path: Path,
    autodetect: bool | None = None,
    comment: str | None = None,
    start_comment: str | None = None,
    end_comment: str | None = None,
    output_format: str | None = None,
    show_content: bool = True,
    console: Console | None = None,
) -> None:
	"""
	Parse a file and print its front matter and content.

	Settings from the environment supply defaults for anything not
	given on the command line.

	Parameters:
		path: Document to parse.
		autodetect: Infer comment syntax from the file extension.
		comment: Single-line comment prefix.
		start_comment: Multi-line comment opening marker.
		end_comment: Multi-line comment closing marker.
		output_format: One of table, json or yaml.
		show_content: Whether to print the content after the front matter.
		console: Rich console for table output.
	"""
	load_env()
	config = Config()
	configure_logging(config.log_level)
	if autodetect is None:
		autodetect = config.autodetect
	fmt = (output_format or config.output_format).lower()
	if fmt not in OUTPUT_FORMATS:
		raise typer.BadParameter(
		    f"format must be one of {', '.join(OUTPUT_FORMATS)}",
		    param_hint="--format")

	explicit = any(v is not None for v in (comment, start_comment, end_comment))
	comment_config = None
	if explicit:
		comment_config = CommentConfig(comment=comment,
		                               start_comment=start_comment,
		                               end_comment=end_comment)
		# explicit delimiters win over an environment default
		autodetect = False

	try:
		parsed = parse_file(path, comment_config, autodetect=autodetect,
		                    encoding=config.encoding)
	except (FrontMatterError, yaml.YAMLError) as exc:
		logger.debug("failed to parse %s", path, exc_info=True)
		typer.echo(f"Error: {exc}", err=True)
		raise typer.Exit(code=1)

	if fmt == "json":
		typer.echo(render_json(parsed, include_content=show_content))
	elif fmt == "yaml":
		typer.echo(render_yaml(parsed, include_content=show_content), nl=False)
	else:
		(console or Console()).print(
		    render_table(parsed, include_content=show_content))


@cli.command("parse")
def parse_command(
    path: Path = typer.Argument(..., help="Document to parse"),
    autodetect: bool = typer.Option(
        None,
        "--autodetect/--no-autodetect",
        help="Infer comment syntax from the file extension",
    ),
    comment: str = typer.Option(None, "--comment",
                                help="Single-line comment prefix"),
    start_comment: str = typer.Option(
        None, "--start-comment", help="Multi-line comment opening marker"),
    end_comment: str = typer.Option(None, "--end-comment",
                                    help="Multi-line comment closing marker"),
    output_format: str = typer.Option(None, "--format", "-f",
                                      help="Output format: table, json, yaml"),
    show_content: bool = typer.Option(True, "--content/--no-content",
                                      help="Print the document content"),
) -> None:
	"""
	Parse a document and print its front matter.
	"""
	parse_impl(path, autodetect, comment, start_comment, end_comment,
	           output_format, show_content)


@cli.command("syntaxes")
def syntaxes_command() -> None:
	"""
	List the comment syntaxes used by --autodetect.
	"""
	Console().print(render_syntaxes(SYNTAXES))


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `parse` when appropriate.

	Allows calling 'front-matter-parser doc.md' without explicitly
	specifying the 'parse' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["parse"] + args
	return _click_app.main(
	    args=args,
	    prog_name="front-matter-parser",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
