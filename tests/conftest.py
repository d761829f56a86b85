"""Fixtures: isolated settings, mocked HTTP transport."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from ght.core.config import AppSettings

HTML_CONTENT_TYPE = {"content-type": "text/html; charset=utf-8"}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's GHT_* variables out of the tests."""
    for name in ("GHT_HTTP_TIMEOUT_SECONDS", "GHT_MAX_BODY_BYTES", "GHT_USER_AGENT", "GHT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def html_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport serving `body` and recording every request."""

    def factory(body: bytes | str = b"", status_code: int = 200, headers=None, requests=None):
        if isinstance(body, str):
            body = body.encode("utf-8")

        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(
                status_code,
                content=body,
                headers=headers if headers is not None else HTML_CONTENT_TYPE,
            )

        return httpx.MockTransport(handler)

    return factory
