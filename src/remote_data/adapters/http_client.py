"""httpx wrapper.

Why a builder:
- Standardises timeout, headers and redirect policy for every exchange.
- Lets tests swap the network for an `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from remote_data.core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` from settings.

    The timeout is None unless `http_timeout_seconds` is configured: an
    exchange waits for the transport to resolve or fail.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, object] = {}
    if settings.base_url:
        kwargs["base_url"] = settings.base_url
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        **kwargs,
    )
