"""Command-line argument model and click-level parsing tweaks.

Short options follow the classic getopt-like reading rather than click's:
inside a cluster every letter is a flag, and each `u` takes the next
*token* as its value (`-um example.com` is markdown plus a URL, `-uexample.com`
is an unknown option `-e`). `expand_args` rewrites the raw tokens into
canonical long options before click parses them, so click only ever sees
`--help`, `--markdown`, `--copy`, `--url=<value>` and positionals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import click
from typer.core import TyperCommand

from ght.cli.ui_components import USAGE_TEXT

_FLAGS = {"-h": "--help", "-m": "--markdown", "-c": "--copy"}
_SHORT_FLAGS = {"h": "--help", "m": "--markdown", "c": "--copy"}
_URL_OPTIONS = ("-u", "--url")


@dataclass(frozen=True)
class ParsedArgs:
    help: bool = False
    markdown: bool = False
    copy: bool = False
    url_flag: str | None = None
    positionals: tuple[str, ...] = field(default_factory=tuple)


def _missing_value(option: str, ctx: click.Context | None) -> click.BadOptionUsage:
    return click.BadOptionUsage(option, f"Option '{option}' requires an argument.", ctx=ctx)


def expand_args(args: Sequence[str], ctx: click.Context | None = None) -> list[str]:
    """Rewrite raw tokens into the canonical long forms click parses.

    Raises `click.BadOptionUsage` when `-u`/`--url` (alone or in a cluster)
    has no following token, and `click.NoSuchOption` for any other letter or
    unknown `--option`.
    """

    expanded: list[str] = []
    index = 0
    while index < len(args):
        arg = args[index]
        index += 1

        if arg in _FLAGS.values():
            expanded.append(arg)
        elif arg in _FLAGS:
            expanded.append(_FLAGS[arg])
        elif arg in _URL_OPTIONS:
            if index >= len(args):
                raise _missing_value(arg, ctx)
            expanded.append(f"--url={args[index]}")
            index += 1
        elif arg.startswith("--url="):
            expanded.append(arg)
        elif arg.startswith("-u="):
            expanded.append(f"--url={arg[3:]}")
        elif arg.startswith("--"):
            raise click.NoSuchOption(arg, ctx=ctx)
        elif arg.startswith("-") and len(arg) > 1:
            for letter in arg[1:]:
                if letter in _SHORT_FLAGS:
                    expanded.append(_SHORT_FLAGS[letter])
                elif letter == "u":
                    if index >= len(args):
                        raise _missing_value("-u", ctx)
                    expanded.append(f"--url={args[index]}")
                    index += 1
                else:
                    raise click.NoSuchOption(f"-{letter}", ctx=ctx)
        else:
            expanded.append(arg)
    return expanded


class GhtCommand(TyperCommand):
    """Typer command with the tool's own option reading and usage text.

    Click prints `get_usage()` above a usage error only when the error carries
    a context, so every parse failure gets one attached here.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, expand_args(args, ctx))
        except click.UsageError as exc:
            if exc.ctx is None:
                exc.ctx = ctx
            raise

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        formatter.write(USAGE_TEXT)
