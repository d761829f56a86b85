"""Error taxonomy.

Why a dedicated module:
- Adapters translate library exceptions (httpx, subprocess) into these types.
- The CLI maps each family to an exit code without knowing about I/O details.
"""

from __future__ import annotations


class GhtError(Exception):
    """Base class for every failure the tool reports to the user."""


class ArgumentError(GhtError):
    """The URL source on the command line is missing, blank, duplicated or ambiguous."""


class FetchError(GhtError):
    """The page could not be retrieved (transport failure, bad URL, body read failure)."""


class HTTPStatusError(FetchError):
    """The server answered with a status outside the 2xx range."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(f"HTTP error: {status}")


class ExtractionError(GhtError):
    """The body has no usable `<title>`."""


class ClipboardError(GhtError):
    """No clipboard helper could take the text."""

    def __init__(self, message: str, attempts: list[str] | None = None) -> None:
        self.attempts = attempts or []
        super().__init__(message)
