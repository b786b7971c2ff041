"""Request payload classification and encoding.

Callers may hand the executor either an explicit `NoBody` / `JsonBody` /
`MultipartBody` or a raw value. Raw values are classified once:

- None                                   -> NoBody
- mapping with a file under `file_field` -> MultipartBody
- anything else                          -> JsonBody

Encoding turns the classified payload into keyword arguments for
`httpx.AsyncClient.request` and adjusts the header mapping in place.
"""

from __future__ import annotations

import io
import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from remote_data.core.domain.models import FileUpload, JsonBody, MultipartBody, NoBody, Payload
from remote_data.core.errors import PayloadEncodingError

CONTENT_TYPE = "Content-Type"
JSON_CONTENT_TYPE = "application/json"


def is_file_object(value: Any) -> bool:
    """True for uploads and open binary file objects."""

    if isinstance(value, FileUpload):
        return True
    return isinstance(value, io.IOBase) and not isinstance(value, io.TextIOBase)


def classify_payload(raw: Any, *, file_field: str) -> Payload:
    if raw is None:
        return NoBody()
    if isinstance(raw, (NoBody, JsonBody, MultipartBody)):
        return raw

    if isinstance(raw, Mapping) and is_file_object(raw.get(file_field)):
        upload = raw[file_field]
        if not isinstance(upload, FileUpload):
            upload = FileUpload.from_file(upload, default_name=file_field)
        fields = {key: value for key, value in raw.items() if key != file_field}
        return MultipartBody(fields=fields, file_field=file_field, file=upload)

    return JsonBody(value=raw)


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _json_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise PayloadEncodingError(f"Payload is not JSON serializable: {exc}") from exc


def encode_payload(payload: Payload, headers: dict[str, str]) -> dict[str, Any]:
    """Build httpx request kwargs for `payload`, updating `headers` in place."""

    if isinstance(payload, NoBody):
        return {}

    if isinstance(payload, MultipartBody):
        # httpx computes the boundary only when no Content-Type is set.
        headers.pop(CONTENT_TYPE, None)
        data = {key: _form_value(value) for key, value in payload.fields.items() if value is not None}
        if payload.file is not None and payload.file_field:
            return {"data": data, "files": {payload.file_field: payload.file.as_httpx_file()}}
        # No file: send text parts as nameless-file parts so the body stays multipart.
        return {"files": {key: (None, value.encode("utf-8")) for key, value in data.items()}}

    headers[CONTENT_TYPE] = JSON_CONTENT_TYPE
    return {"content": _json_text(payload.value).encode("utf-8")}
