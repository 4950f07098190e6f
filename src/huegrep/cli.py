"""CLI entry point for huegrep."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from typing import Annotated

import typer

from huegrep import __version__
from huegrep.config import build_settings, load_config
from huegrep.exceptions import HueGrepError, OutputWriteError
from huegrep.highlight import Highlighter
from huegrep.logging_utils import setup_logging
from huegrep.reader import is_pipe, read_lines, write_line

logger = logging.getLogger(__name__)

# -h belongs to --no-highlight, so help is long-form only.
app = typer.Typer(add_completion=False, context_settings={"help_option_names": ["--help"]})


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"huegrep {__version__}")
        raise typer.Exit


def _passthrough_undecodable_bytes() -> None:
    """Let bytes that are not valid UTF-8 travel from stdin to stdout untouched."""
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")


def _silence_stdout() -> None:
    """Point stdout at devnull so the final flush after a broken pipe stays quiet."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    with contextlib.suppress(OSError, ValueError):
        os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def _report(error: HueGrepError) -> None:
    """Print an error and its chain of causes on stderr."""
    typer.echo(f"Error: {error}", err=True)
    cause = error.__cause__
    while cause is not None:
        typer.echo(f"  Caused by: {cause}", err=True)
        cause = cause.__cause__


def _run(highlighter: Highlighter) -> None:
    for line in read_lines():
        rendered = highlighter.highlight(line)
        if rendered is not None:
            write_line(rendered)


@app.command()
def run(  # noqa: PLR0913
    patterns: Annotated[list[str], typer.Argument(help="Patterns to highlight, one color each")],
    fixed_strings: Annotated[
        bool, typer.Option("--fixed-strings", "-F", help="Match patterns literally")
    ] = False,  # noqa: FBT002
    ignore_case: Annotated[
        bool, typer.Option("--ignore-case", "-i", help="Perform case-insensitive matching")
    ] = False,  # noqa: FBT002
    no_highlight: Annotated[
        bool, typer.Option("--no-highlight", "-h", help="Do not color by changing the background color")
    ] = False,  # noqa: FBT002
    only_highlight: Annotated[
        bool, typer.Option("--only-highlight", "-H", help="Only color by changing the background color")
    ] = False,  # noqa: FBT002
    full_match_highlight: Annotated[
        bool, typer.Option("--full-match-highlight", "-f", help="Color whole matches, ignoring capturing groups")
    ] = False,  # noqa: FBT002
    only_matching_lines: Annotated[
        bool, typer.Option("--only-matching-lines", "-m", help="Only print lines with at least one match")
    ] = False,  # noqa: FBT002
    vary_group_colors: Annotated[
        bool, typer.Option("--vary-group-colors", "-g", help="Give each capturing group its own color")
    ] = False,  # noqa: FBT002
    no_vary_group_colors: Annotated[
        bool, typer.Option("--no-vary-group-colors", "-G", help="Color capturing groups like their pattern")
    ] = False,  # noqa: FBT002
    debug: Annotated[bool, typer.Option("--debug", help="More verbose output on errors")] = False,  # noqa: FBT002
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
    ] = None,
) -> None:
    """Highlight every pattern in its own color in lines read from stdin."""
    setup_logging(debug=debug)

    try:
        settings = build_settings(
            patterns,
            load_config(),
            fixed_strings=fixed_strings,
            ignore_case=ignore_case,
            no_highlight=no_highlight,
            only_highlight=only_highlight,
            full_match_highlight=full_match_highlight,
            only_matching_lines=only_matching_lines,
            vary_group_colors=vary_group_colors,
            no_vary_group_colors=no_vary_group_colors,
        )
        highlighter = Highlighter(settings)
    except HueGrepError as e:
        logger.debug("startup failed", exc_info=True)
        _report(e)
        raise typer.Exit(1) from e

    if not is_pipe():
        typer.echo("Error: provide pipe input", err=True)
        raise typer.Exit(1)

    _passthrough_undecodable_bytes()
    try:
        _run(highlighter)
    except OutputWriteError as e:
        logger.debug("output failed", exc_info=True)
        _silence_stdout()
        _report(e)
        raise typer.Exit(1) from e


def main() -> None:
    """Entry point for the CLI."""
    app()
