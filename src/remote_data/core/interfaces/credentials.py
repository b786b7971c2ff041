"""Credential source contract.

Rules:
- `get_access_token` is synchronous: it is read while the request is built.
- Returning None means "not signed in"; the executor does not validate further.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialProvider(Protocol):
    """Anything able to hand out the current bearer token."""

    def get_access_token(self) -> str | None:
        """Return the current access token, or None when not authenticated."""

        ...
