"""Errors raised by the request executor.

Every failure of an exchange is one of these, so callers can catch
`RemoteDataError` and still read the specific fields of each kind.
"""

from __future__ import annotations

import httpx


class RemoteDataError(Exception):
    """Base class for every failure stored in an executor's `error` cell."""


class HTTPStatusError(RemoteDataError):
    """The server answered with a status outside the 2xx range."""

    def __init__(self, status: int, status_text: str) -> None:
        self.status = status
        self.status_text = status_text
        super().__init__(f"HTTP Error {status}: {status_text}")


class UnexpectedContentTypeError(RemoteDataError):
    """The response declared a content type the executor does not decode."""

    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__(f"Unexpected response type: {content_type}")


class TransportError(RemoteDataError):
    """No response was obtained (bad URL, DNS, connection reset, timeout...)."""

    def __init__(self, original: httpx.RequestError | httpx.InvalidURL | UnicodeEncodeError) -> None:
        self.original = original
        super().__init__(str(original) or type(original).__name__)


class ResponseDecodeError(RemoteDataError):
    """The body did not match its declared content type."""


class PayloadEncodingError(RemoteDataError):
    """The payload could not be turned into a request body."""
