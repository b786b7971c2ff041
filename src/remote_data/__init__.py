"""remote-data: HTTP requests wrapped in reactive `data` / `error` / `loading` state."""

from remote_data.core.domain.models import (
    Blob,
    FileUpload,
    HttpMethod,
    JsonBody,
    MultipartBody,
    NoBody,
    RequestOutcome,
    UserData,
)
from remote_data.core.errors import (
    HTTPStatusError,
    PayloadEncodingError,
    RemoteDataError,
    ResponseDecodeError,
    TransportError,
    UnexpectedContentTypeError,
)
from remote_data.core.reactive import Ref, to_ref, unref
from remote_data.core.services.request_executor import RemoteData, RequestExecutor, use_remote_data

__version__ = "0.1.0"

__all__ = [
    "Blob",
    "FileUpload",
    "HTTPStatusError",
    "HttpMethod",
    "JsonBody",
    "MultipartBody",
    "NoBody",
    "PayloadEncodingError",
    "Ref",
    "RemoteData",
    "RemoteDataError",
    "RequestExecutor",
    "RequestOutcome",
    "ResponseDecodeError",
    "TransportError",
    "UnexpectedContentTypeError",
    "UserData",
    "to_ref",
    "unref",
    "use_remote_data",
]
