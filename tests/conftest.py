"""Pytest configuration for remote-data."""

from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest

from remote_data.core.config import AppSettings


@pytest.fixture
def anyio_backend() -> str:
    # The executor schedules asyncio tasks.
    return "asyncio"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith("REMOTE_DATA_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def mock_client() -> Callable[..., httpx.AsyncClient]:
    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
