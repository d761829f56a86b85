"""httpx wrapper.

Why a wrapper:
- Standardizes timeout, headers and redirect policy in one builder.
- Keeps testing simple: a `transport` (e.g. `httpx.MockTransport`) can be injected.
- Translates httpx exceptions into `FetchError` so the CLI never sees httpx types.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import httpx

from ght.core.config import AppSettings
from ght.core.errors import FetchError, HTTPStatusError

logger = logging.getLogger(__name__)


@dataclass
class FetchedPage:
    """Raw outcome of a successful GET (2xx, body read up to the cap)."""

    url: str
    final_url: str
    status_code: int
    body: bytes
    charset: str | None = None
    truncated: bool = False


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the tool's defaults.

    Redirects are followed with httpx's default policy. The timeout applies to
    each phase (connect, read, ...); `fetch_page` adds the overall deadline.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def fetch_page(
    url: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> FetchedPage:
    """GET `url` and return at most `settings.max_body_bytes` of its body.

    Raises:
    - `HTTPStatusError` for a status outside 2xx (the body is not read).
    - `FetchError` for transport failures, invalid URLs, read failures and
      when the overall deadline passes (each phase is also limited to the
      remaining budget).
    """

    settings = settings or AppSettings()
    deadline = time.monotonic() + settings.http_timeout_seconds

    logger.debug("GET %s", url)
    try:
        with build_client(settings, transport=transport) as client:
            with client.stream("GET", url, timeout=_remaining(deadline)) as response:
                if time.monotonic() > deadline:
                    raise FetchError("failed to fetch URL: timed out")
                logger.debug("%s -> %s %s", url, response.status_code, response.url)
                if not response.is_success:
                    raise HTTPStatusError(response.status_code, response.reason_phrase)

                body, truncated = _read_capped(
                    response,
                    limit=settings.max_body_bytes,
                    deadline=deadline,
                )
                return FetchedPage(
                    url=url,
                    final_url=str(response.url),
                    status_code=response.status_code,
                    body=body,
                    charset=response.charset_encoding,
                    truncated=truncated,
                )
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
        # UnicodeError: IDNA or encoding failures while building the request.
        raise FetchError(f"failed to fetch URL: {exc}") from exc


def _remaining(deadline: float) -> httpx.Timeout:
    """Per-request timeout limited to what is left of the overall budget."""

    return httpx.Timeout(max(deadline - time.monotonic(), 0.001))


def _read_capped(
    response: httpx.Response,
    *,
    limit: int,
    deadline: float,
) -> tuple[bytes, bool]:
    """Read the body until EOF or `limit` bytes, whichever comes first.

    Bytes past the limit are left unread; the caller's context manager closes
    the stream.
    """

    buffer = bytearray()
    try:
        for chunk in response.iter_bytes():
            buffer.extend(chunk)
            if len(buffer) >= limit:
                logger.debug("body reached %d bytes, stopped reading", limit)
                return bytes(buffer[:limit]), True
            if time.monotonic() > deadline:
                raise FetchError("failed to read response: timed out")
    except httpx.HTTPError as exc:
        raise FetchError(f"failed to read response: {exc}") from exc

    logger.debug("read %d bytes", len(buffer))
    return bytes(buffer), False
