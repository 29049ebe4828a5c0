from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

import typer
from pydantic import ValidationError
from typer.main import get_command

from content_frontmatter.core.batch import check_content
from content_frontmatter.core.loader import load_file
from content_frontmatter.errors import FrontMatterError
from content_frontmatter.models.check_params import CheckParams
from content_frontmatter.models.config import Config, load_env
from content_frontmatter.ui.reporting import print_check_report, print_document
from content_frontmatter.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

cli = typer.Typer(add_completion=False, no_args_is_help=False)

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_USAGE = 2


@cli.callback()
def root() -> None:
	"""
	Root callback for the content-frontmatter CLI.

	Loads and validates front matter of site content files.
	"""
	return None


def check_impl(
    paths: list[str] | None = None,
    pattern: str | None = None,
    max_workers: int | None = None,
    required: list[str] | None = None,
) -> int:
	"""
	Load every content file and report all problems in one pass.

	Parameters:
		paths: Files or directories to check; defaults to CONTENT_DIR.
		pattern: Override for the content glob.
		max_workers: Override for the number of concurrent loads.
		required: Override for the required front-matter fields.

	Returns:
		Process exit code: 0 when every file is valid, 1 when any file
		has problems, 2 on usage errors.
	"""
	load_env()
	config = Config()
	configure_logging(config.log_level)
	try:
		params = CheckParams(
		    paths=paths or [],
		    pattern=pattern,
		    max_workers=max_workers,
		    required=required or None,
		)
	except ValidationError as exc:
		typer.echo(f"invalid arguments: {exc}", err=True)
		return EXIT_USAGE
	config.apply_overrides(params)
	logger.debug(
	    "check with content_dir=%s, glob=%s, max_workers=%d, required=%s",
	    config.content_dir, config.content_glob, config.max_workers,
	    ",".join(config.required_fields))

	try:
		reports = asyncio.run(check_content(config, params.paths or None))
	except FileNotFoundError as exc:
		typer.echo(str(exc), err=True)
		return EXIT_USAGE

	bad_files = print_check_report(reports)
	return EXIT_PROBLEMS if bad_files else EXIT_OK


def show_impl(path: str) -> int:
	"""
	Print one document's decoded front matter as JSON.

	Parameters:
		path: Content file to load.

	Returns:
		Process exit code: 0 when the document is valid, 1 otherwise.
	"""
	load_env()
	config = Config()
	configure_logging(config.log_level)
	try:
		doc = load_file(path, required=config.required_fields)
	except FrontMatterError as exc:
		typer.echo(f"{type(exc).__name__}: {exc}", err=True)
		return EXIT_PROBLEMS
	except UnicodeDecodeError as exc:
		typer.echo(f"{path}: not valid UTF-8 ({exc.reason})", err=True)
		return EXIT_PROBLEMS
	except OSError as exc:
		typer.echo(str(exc), err=True)
		return EXIT_USAGE
	print_document(doc)
	return EXIT_OK if doc.is_valid else EXIT_PROBLEMS


@cli.command()
def check(
    paths: Optional[List[str]] = typer.Argument(
        None, help="Files or directories (default: CONTENT_DIR)"),
    pattern: str = typer.Option(None, "--pattern",
                                help="Override content glob"),
    max_workers: int = typer.Option(None, "--max-workers",
                                    help="Override concurrent loads"),
    required: Optional[List[str]] = typer.Option(
        None,
        "--required",
        help="Required field (repeatable); title is always required",
    ),
) -> None:
	"""
	Check front matter of every content file and list all problems.
	"""
	code = check_impl(paths, pattern, max_workers, required)
	if code:
		raise typer.Exit(code=code)


@cli.command()
def show(path: str) -> None:
	"""
	Show the decoded front matter of a single content file.
	"""
	code = show_impl(path)
	if code:
		raise typer.Exit(code=code)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `check` when appropriate.

	Allows calling 'content-frontmatter content/english' without
	explicitly specifying the 'check' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if not args:
		args = ["check"]
	elif not args[0].startswith("-") and args[0] not in commands:
		args = ["check"] + args
	return _click_app.main(
	    args=args,
	    prog_name="content-frontmatter",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
