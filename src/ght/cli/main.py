"""`ght` command.

Control flow is linear: parse, resolve the URL, fetch and extract the title,
print it, then optionally copy it. This is the only module that maps errors to
exit codes:

- 0: success
- 1: fetch / HTTP / extraction / clipboard / configuration failure
- 2: usage or argument error (usage text is printed to stderr)
"""

from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer
from pydantic import ValidationError

from ght.adapters.clipboard import copy_to_clipboard
from ght.cli.arguments import GhtCommand, ParsedArgs
from ght.cli.ui_components import (
    USAGE_TEXT,
    build_error_console,
    print_error,
    print_usage,
    print_warning,
)
from ght.core.config import AppSettings
from ght.core.errors import ArgumentError, ClipboardError, GhtError
from ght.core.services.formatter import format_output
from ght.core.services.title_pipeline import fetch_title
from ght.core.services.url_resolver import resolve_url
from ght.logging_config import setup_logging

EXIT_FAILURE = 1
EXIT_USAGE = 2

app = typer.Typer(
    add_completion=False,
    pretty_exceptions_show_locals=False,
)

logger = logging.getLogger(__name__)


@app.command(cls=GhtCommand, add_help_option=False)
def ght(
    urls: Annotated[
        list[str] | None,
        typer.Argument(metavar="[<url>]", show_default=False),
    ] = None,
    help_: Annotated[bool, typer.Option("-h", "--help")] = False,
    url: Annotated[
        str | None,
        typer.Option("-u", "--url", show_default=False),
    ] = None,
    markdown: Annotated[bool, typer.Option("-m", "--markdown")] = False,
    copy: Annotated[bool, typer.Option("-c", "--copy")] = False,
) -> None:
    """Get HTML Title."""

    args = ParsedArgs(
        help=help_,
        markdown=markdown,
        copy=copy,
        url_flag=url,
        positionals=tuple(urls or ()),
    )
    err_console = build_error_console()

    if args.help:
        typer.echo(USAGE_TEXT, nl=False)
        raise typer.Exit()

    try:
        raw_url = resolve_url(args.positionals, args.url_flag)
    except ArgumentError as exc:
        print_error(err_console, str(exc))
        print_usage(err_console)
        raise typer.Exit(code=EXIT_USAGE) from exc

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(err_console, f"invalid configuration: {exc}")
        raise typer.Exit(code=EXIT_FAILURE) from exc

    setup_logging(settings.log_level)

    try:
        result = fetch_title(raw_url, settings=settings)
    except GhtError as exc:
        print_error(err_console, str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    output = format_output(result.title, result.url, markdown=args.markdown)
    # Titles are printed byte-for-byte, escape sequences included.
    typer.echo(output, color=True)

    if args.copy:
        try:
            command = copy_to_clipboard(output)
        except ClipboardError as exc:
            print_warning(err_console, f"clipboard copy failed: {exc}")
            raise typer.Exit(code=EXIT_FAILURE) from exc
        logger.info("copied to clipboard with %s", command.name)


def run() -> None:
    """Console-script entry point."""

    # cp1252 consoles cannot print most titles.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    app(prog_name="ght")


if __name__ == "__main__":
    run()
