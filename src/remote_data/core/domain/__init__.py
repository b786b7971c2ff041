"""Domain models and entities.

Plain, strict data structures (Pydantic v2). The domain knows nothing about
httpx or the CLI.
"""

from remote_data.core.domain.models import (
    Blob,
    FileUpload,
    HttpMethod,
    JsonBody,
    MultipartBody,
    NoBody,
    Payload,
    RequestOutcome,
    UserData,
)

__all__ = [
    "Blob",
    "FileUpload",
    "HttpMethod",
    "JsonBody",
    "MultipartBody",
    "NoBody",
    "Payload",
    "RequestOutcome",
    "UserData",
]
