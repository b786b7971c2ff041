"""Request executor: one HTTP exchange wrapped in reactive state.

The executor owns three cells (`data`, `error`, `loading`) that UI layers bind
to, and an `execute()` trigger returning an `asyncio.Task`. Inputs (target,
method, auth flag, payload) are references read at invocation time, so one
executor can be reused after its inputs change.

Order of one invocation:
1. `loading` -> True, inputs snapshotted (synchronously, inside `execute()`).
2. Headers built; bearer token added when `auth` is set.
3. Payload classified and encoded (JSON or multipart).
4. Exchange sent; non-2xx -> `HTTPStatusError`.
5. Body decoded by Content-Type (pdf, webp, json; anything else fails).
6. `data` or `error` updated, then `loading` -> False.

Overlapping invocations share the cells: the last one to settle wins, unless
`discard_stale` is enabled, in which case only the newest invocation writes.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from remote_data.adapters.http_client import build_async_client
from remote_data.adapters.object_urls import get_object_url_registry
from remote_data.adapters.session_store import get_session_store
from remote_data.core.config import AppSettings
from remote_data.core.domain.models import Blob, HttpMethod, RequestOutcome
from remote_data.core.errors import (
    HTTPStatusError,
    RemoteDataError,
    ResponseDecodeError,
    TransportError,
    UnexpectedContentTypeError,
)
from remote_data.core.interfaces.credentials import CredentialProvider
from remote_data.core.interfaces.object_urls import ObjectUrlFactory
from remote_data.core.payloads import CONTENT_TYPE, JSON_CONTENT_TYPE, classify_payload, encode_payload
from remote_data.core.reactive import Ref, to_ref

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
WEBP_CONTENT_TYPE = "image/webp"


@dataclass(frozen=True)
class _Invocation:
    """Inputs captured when `execute()` was called."""

    sequence: int
    target: str
    method: HttpMethod
    auth: bool
    token: str | None
    payload: Any


class RequestExecutor:
    """Performs HTTP exchanges and mirrors their outcome into `Ref` cells."""

    def __init__(
        self,
        target: str | Ref[str],
        auth: bool | Ref[bool] = False,
        method: str | HttpMethod | Ref[Any] = HttpMethod.GET,
        payload: Any = None,
        *,
        credentials: CredentialProvider | None = None,
        client: httpx.AsyncClient | None = None,
        settings: AppSettings | None = None,
        object_urls: ObjectUrlFactory | None = None,
        discard_stale: bool | None = None,
    ) -> None:
        self.target: Ref[str] = to_ref(target)
        self.auth: Ref[bool] = to_ref(auth)
        self.method: Ref[Any] = to_ref(method)
        self.payload: Ref[Any] = to_ref(payload)

        self.data: Ref[Any] = Ref(None)
        self.error: Ref[RemoteDataError | None] = Ref(None)
        self.loading: Ref[bool] = Ref(False)

        self._settings = settings or AppSettings()
        self._credentials = credentials
        self._client = client
        self._object_urls = object_urls
        self._discard_stale = self._settings.discard_stale if discard_stale is None else discard_stale
        self._sequence = 0

    def execute(self) -> asyncio.Task[Any]:
        """Start one exchange and return the task that settles with its body.

        Must be called with a running event loop. `loading` is already True
        when this returns.
        """

        loop = asyncio.get_running_loop()
        invocation = self._snapshot()
        self.loading.value = True
        return loop.create_task(self._run(invocation))

    async def execute_result(self) -> RequestOutcome:
        """Like `execute()`, but returns the outcome instead of raising."""

        try:
            value = await self.execute()
        except RemoteDataError as exc:
            return RequestOutcome(error=exc)
        return RequestOutcome(value=value)

    def _snapshot(self) -> _Invocation:
        method = HttpMethod.parse(self.method.value)
        auth = self.auth.value is True
        token = None
        if auth:
            credentials = self._credentials or get_session_store()
            token = credentials.get_access_token()

        self._sequence += 1
        return _Invocation(
            sequence=self._sequence,
            target=str(self.target.value),
            method=method,
            auth=auth,
            token=token,
            payload=self.payload.value,
        )

    def _owns_state(self, invocation: _Invocation) -> bool:
        return not self._discard_stale or invocation.sequence == self._sequence

    async def _run(self, invocation: _Invocation) -> Any:
        try:
            body = await self._exchange(invocation)
        except RemoteDataError as exc:
            logger.error("Fetch error (%s %s): %s", invocation.method.value, invocation.target, exc)
            if self._owns_state(invocation):
                self.error.value = exc
            raise
        else:
            logger.debug("Response (%s %s): %r", invocation.method.value, invocation.target, body)
            if self._owns_state(invocation):
                self.data.value = body
            return body
        finally:
            if self._owns_state(invocation):
                self.loading.value = False

    async def _exchange(self, invocation: _Invocation) -> Any:
        headers = {CONTENT_TYPE: JSON_CONTENT_TYPE}
        if invocation.auth:
            if invocation.token:
                headers["Authorization"] = f"Bearer {invocation.token}"
            else:
                logger.debug("No access token available; sending %s unauthenticated", invocation.target)

        payload = classify_payload(invocation.payload, file_field=self._settings.file_field)
        body_kwargs = encode_payload(payload, headers)

        if self._client is not None:
            response = await self._send(self._client, invocation, headers, body_kwargs)
        else:
            async with build_async_client(self._settings) as client:
                response = await self._send(client, invocation, headers, body_kwargs)

        return self._decode(response)

    async def _send(
        self,
        client: httpx.AsyncClient,
        invocation: _Invocation,
        headers: dict[str, str],
        body_kwargs: dict[str, Any],
    ) -> httpx.Response:
        # Unparseable targets and non-ASCII header values fail while httpx builds the request.
        try:
            return await client.request(invocation.method.value, invocation.target, headers=headers, **body_kwargs)
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise TransportError(exc) from exc

    def _decode(self, response: httpx.Response) -> Any:
        if not response.is_success:
            raise HTTPStatusError(response.status_code, response.reason_phrase)

        content_type = response.headers.get(CONTENT_TYPE)
        declared = content_type or ""

        if PDF_CONTENT_TYPE in declared:
            return Blob(content=response.content, content_type=content_type)
        if WEBP_CONTENT_TYPE in declared:
            object_urls = self._object_urls or get_object_url_registry()
            return object_urls.create(Blob(content=response.content, content_type=content_type))
        if JSON_CONTENT_TYPE in declared:
            try:
                return response.json()
            except ValueError as exc:
                raise ResponseDecodeError(f"Invalid JSON body: {exc}") from exc

        raise UnexpectedContentTypeError(content_type)


@dataclass
class RemoteData:
    """What a consumer binds to: the three cells and the trigger."""

    data: Ref[Any]
    error: Ref[RemoteDataError | None]
    loading: Ref[bool]
    execute: Callable[[], "asyncio.Task[Any]"]
    executor: RequestExecutor


def use_remote_data(
    target: str | Ref[str],
    auth: bool | Ref[bool] = False,
    method: str | HttpMethod | Ref[Any] = HttpMethod.GET,
    payload: Any = None,
    **kwargs: Any,
) -> RemoteData:
    """Build an executor and expose its state the way UI code consumes it."""

    executor = RequestExecutor(target, auth, method, payload, **kwargs)
    return RemoteData(
        data=executor.data,
        error=executor.error,
        loading=executor.loading,
        execute=executor.execute,
        executor=executor,
    )
