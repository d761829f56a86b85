"""Fetch-and-extract orchestration.

The CLI delegates the whole "URL in, title out" flow to `fetch_title`, which
keeps printing and exit codes out of the core and lets tests drive the flow
with a mocked transport.
"""

from __future__ import annotations

import logging

import httpx

from ght.adapters.http_client import fetch_page
from ght.core.config import AppSettings
from ght.core.domain.models import TitleResult
from ght.core.services.title_extractor import decode_body, extract_title
from ght.core.services.url_resolver import ensure_scheme

logger = logging.getLogger(__name__)


def fetch_title(
    url: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> TitleResult:
    """Fetch `url` (default scheme applied) and return its normalized title.

    Raises `FetchError` (or `HTTPStatusError`) and `ExtractionError`.
    """

    settings = settings or AppSettings()
    target = ensure_scheme(url)

    page = fetch_page(target, settings=settings, transport=transport)
    if page.truncated:
        logger.info("body of %s truncated to %d bytes", target, len(page.body))

    title = extract_title(decode_body(page.body, page.charset))
    return TitleResult(
        title=title,
        url=target,
        final_url=page.final_url,
        truncated=page.truncated,
    )
