"""Contract for turning in-memory blobs into locally valid URLs."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from remote_data.core.domain.models import Blob


@runtime_checkable
class ObjectUrlFactory(Protocol):
    def create(self, blob: Blob) -> str:
        """Register `blob` and return a URL naming it."""

        ...
