"""CLI UI components (Rich).

Why separate:
- Keeps command logic free of presentation details.
- Every user-facing stderr line goes through the same console settings.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

USAGE_TEXT = """\
usage: ght [-h|--help] [-u|--url "<value>"] [-m|--markdown] [-c|--copy] [<url>]

           Get HTML Title

Arguments:

  -h  --help      Show this help message
  -u  --url       URL to fetch
  -m  --markdown  Print as a Markdown link
  -c  --copy      Copy the output to the clipboard
"""


def build_error_console() -> Console:
    """Console bound to stderr; highlighting off so messages print verbatim."""

    return Console(stderr=True, highlight=False)


def print_error(console: Console, message: str) -> None:
    console.print(f"[red]error:[/red] {escape(message)}", soft_wrap=True)


def print_warning(console: Console, message: str) -> None:
    console.print(f"[yellow]warning:[/yellow] {escape(message)}", soft_wrap=True)


def print_usage(console: Console) -> None:
    console.print(USAGE_TEXT, markup=False, soft_wrap=True, end="")
