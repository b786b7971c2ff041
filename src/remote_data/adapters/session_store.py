"""Session store: the signed-in user and their access token.

Implements `CredentialProvider`. The executor receives one explicitly; the
process-wide instance from `get_session_store()` is only the fallback.
"""

from __future__ import annotations

import logging

from remote_data.core.config import AppSettings
from remote_data.core.domain.models import UserData
from remote_data.core.interfaces.credentials import CredentialProvider

logger = logging.getLogger(__name__)


class SessionStore(CredentialProvider):
    def __init__(self, user_data: UserData | None = None) -> None:
        self._user_data = user_data

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "SessionStore":
        settings = settings or AppSettings()
        if settings.access_token:
            return cls(UserData(access_token=settings.access_token))
        return cls()

    @property
    def user_data(self) -> UserData | None:
        return self._user_data

    @property
    def is_authenticated(self) -> bool:
        return bool(self._user_data and self._user_data.access_token)

    def sign_in(self, user_data: UserData) -> None:
        self._user_data = user_data
        logger.debug("Session started")

    def sign_out(self) -> None:
        self._user_data = None
        logger.debug("Session cleared")

    def get_access_token(self) -> str | None:
        if self._user_data is None:
            return None
        return self._user_data.access_token


_default_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Process-wide session, seeded from settings on first use."""

    global _default_store
    if _default_store is None:
        _default_store = SessionStore.from_settings()
    return _default_store
