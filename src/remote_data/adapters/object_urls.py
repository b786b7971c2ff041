"""In-process object URLs for binary responses.

`create` hands out `blob:<origin>/<uuid>` strings that stay valid until
revoked; `resolve` gives the bytes back.
"""

from __future__ import annotations

import uuid

from remote_data.core.config import AppSettings
from remote_data.core.domain.models import Blob
from remote_data.core.interfaces.object_urls import ObjectUrlFactory


class ObjectUrlRegistry(ObjectUrlFactory):
    def __init__(self, origin: str = "null") -> None:
        self._origin = origin
        self._blobs: dict[str, Blob] = {}

    def create(self, blob: Blob) -> str:
        url = f"blob:{self._origin}/{uuid.uuid4()}"
        self._blobs[url] = blob
        return url

    def resolve(self, url: str) -> Blob:
        try:
            return self._blobs[url]
        except KeyError:
            raise KeyError(f"Unknown or revoked object URL: {url}") from None

    def revoke(self, url: str) -> None:
        self._blobs.pop(url, None)

    def __contains__(self, url: object) -> bool:
        return url in self._blobs

    def __len__(self) -> int:
        return len(self._blobs)


_default_registry: ObjectUrlRegistry | None = None


def get_object_url_registry() -> ObjectUrlRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = ObjectUrlRegistry(AppSettings().object_url_origin)
    return _default_registry
