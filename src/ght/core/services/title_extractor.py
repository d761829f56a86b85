"""`<title>` extraction from raw HTML.

A single regex match, not an HTML parser: the first `<title ...>...</title>`
wins, attributes on the opening tag are skipped, matching is case-insensitive
and spans newlines.
"""

from __future__ import annotations

import html
import re

from ght.core.errors import ExtractionError

TITLE_PATTERN = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)


def normalize_title(raw: str) -> str:
    """Decode entities, collapse whitespace runs to one space and trim."""

    return " ".join(html.unescape(raw).split())


def extract_title(document: str) -> str:
    match = TITLE_PATTERN.search(document)
    if match is None:
        raise ExtractionError("title tag not found")

    title = normalize_title(match.group(1))
    if not title:
        raise ExtractionError("title was empty")
    return title


def decode_body(body: bytes, charset: str | None = None) -> str:
    """Decode a (possibly truncated) body.

    Unknown charsets fall back to UTF-8; undecodable bytes, such as a multi-byte
    sequence cut by the size cap, become U+FFFD instead of raising.
    """

    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")
