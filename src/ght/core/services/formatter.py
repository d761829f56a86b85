from __future__ import annotations


def format_output(title: str, url: str, *, markdown: bool = False) -> str:
    """Return the line printed to stdout: the bare title or `[title](url)`."""

    if markdown:
        return f"[{title}]({url})"
    return title
