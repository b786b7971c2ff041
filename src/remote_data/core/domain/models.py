"""Domain models (Pydantic v2).

These describe *what* travels through an exchange (methods, payloads,
decoded bodies, outcomes), not *how* it is sent.
"""

from __future__ import annotations

import mimetypes
from enum import Enum
from pathlib import Path
from typing import Any, BinaryIO, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from remote_data.core.errors import RemoteDataError


class HttpMethod(str, Enum):
    """Verbs the executor accepts."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: "str | HttpMethod") -> "HttpMethod":
        if isinstance(value, HttpMethod):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unsupported HTTP method {value!r} (expected one of {allowed})") from None


class Blob(BaseModel):
    """Binary response body kept in memory."""

    content: bytes = Field(
        ...,
        description="Raw bytes as received from the server.",
    )
    content_type: str = Field(
        default="application/octet-stream",
        description="Declared Content-Type of the response.",
    )

    @property
    def size(self) -> int:
        return len(self.content)


class FileUpload(BaseModel):
    """A file attached to a multipart submission."""

    filename: str = Field(
        ...,
        min_length=1,
        description="File name reported in the multipart part.",
    )
    content: bytes = Field(
        ...,
        description="File contents.",
    )
    content_type: str = Field(
        default="application/octet-stream",
        description="MIME type of the part.",
    )

    @classmethod
    def from_path(cls, path: Path) -> "FileUpload":
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=_guess_type(path.name),
        )

    @classmethod
    def from_file(cls, fileobj: BinaryIO, *, default_name: str = "upload") -> "FileUpload":
        """Read an open binary file object into an upload."""

        name = Path(str(getattr(fileobj, "name", "") or default_name)).name or default_name
        return cls(filename=name, content=fileobj.read(), content_type=_guess_type(name))

    def as_httpx_file(self) -> tuple[str, bytes, str]:
        return (self.filename, self.content, self.content_type)


def _guess_type(name: str) -> str:
    guessed, _ = mimetypes.guess_type(name)
    return guessed or "application/octet-stream"


class UserData(BaseModel):
    """Signed-in user as known to the session store."""

    model_config = ConfigDict(extra="allow")

    access_token: str | None = Field(
        default=None,
        description="Bearer token for authenticated requests.",
    )


class NoBody(BaseModel):
    """Request without a body."""


class JsonBody(BaseModel):
    """Body sent as `application/json` (strings are sent verbatim)."""

    value: Any = Field(
        ...,
        description="JSON-serializable value, pydantic model or pre-encoded string.",
    )


class MultipartBody(BaseModel):
    """Body sent as `multipart/form-data`."""

    fields: dict[str, Any] = Field(
        default_factory=dict,
        description="Text parts; None values are skipped.",
    )
    file_field: str | None = Field(
        default=None,
        description="Name of the file part.",
    )
    file: FileUpload | None = Field(
        default=None,
        description="File part contents.",
    )


Payload = Union[NoBody, JsonBody, MultipartBody]


class RequestOutcome(BaseModel):
    """Settled result of one exchange: either a value or an error."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Any = None
    error: RemoteDataError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
