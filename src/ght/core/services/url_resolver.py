"""URL source resolution.

The URL can come from `-u/--url` or from a single positional argument, never
both. This module picks the effective value and applies the default scheme.
"""

from __future__ import annotations

from typing import Sequence

from ght.core.errors import ArgumentError

DEFAULT_SCHEME = "https://"
_KNOWN_PREFIXES = ("http://", "https://")


def resolve_url(positionals: Sequence[str], url_flag: str | None) -> str:
    """Return the single URL supplied on the command line.

    Raises `ArgumentError` when the flag and a positional are both present,
    when no URL (or more than one) is given, or when the value is blank.
    The returned string is not modified; see `ensure_scheme`.
    """

    if url_flag is not None:
        if positionals:
            raise ArgumentError(
                "supply the URL with -u/--url or as a positional argument, not both"
            )
        if not url_flag.strip():
            raise ArgumentError("URL is empty")
        return url_flag

    if not positionals:
        raise ArgumentError("URL is required")
    if len(positionals) > 1:
        raise ArgumentError("only one URL may be given")
    if not positionals[0].strip():
        raise ArgumentError("URL is empty")
    return positionals[0]


def ensure_scheme(url: str) -> str:
    """Prefix `https://` unless the URL already starts with http:// or https://."""

    if url.startswith(_KNOWN_PREFIXES):
        return url
    return DEFAULT_SCHEME + url
