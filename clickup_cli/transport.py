"""Async HTTP transport for the ClickUp API using httpx.

One httpx.AsyncClient is created per Transport and reused for every request.
The transport signs requests, serializes JSON bodies, maps non-2xx responses
onto the error kinds in ``clickup_cli.errors`` and decodes payloads with
pydantic.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache
from typing import Any, Iterator

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from clickup_cli.errors import (
    DecodeError,
    EncodeError,
    HTTPRequestError,
    RequestCancelledError,
    api_error_class,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.clickup.com/api"
DEFAULT_USER_AGENT = "clickup-cli/1.0"
OAUTH_TOKEN_PATH = "/v2/oauth/token"
MAX_RESPONSE_BYTES = 16 * 1024 * 1024

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

_deadline: ContextVar[float | None] = ContextVar("clickup_deadline", default=None)


@contextmanager
def deadline(seconds: float) -> Iterator[None]:
    """Abort any request issued inside the block once ``seconds`` elapse.

        with deadline(5):
            task = await client.tasks.get("abc")

    Nested deadlines keep the earlier expiry.
    """
    expires = time.monotonic() + seconds
    current = _deadline.get()
    if current is not None:
        expires = min(expires, current)
    token = _deadline.set(expires)
    try:
        yield
    finally:
        _deadline.reset(token)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _serialize_body(body: Any) -> bytes | None:
    """Return the JSON bytes for ``body``, or None when there is no body."""
    if body is None:
        return None
    try:
        if isinstance(body, BaseModel):
            data = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            data = _adapter(type(body)).dump_python(body, mode="json")
        encoded = json.dumps(data, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"marshal request body: {e}") from e
    if encoded == "null":
        return None
    return encoded.encode("utf-8")


def _parse_error_envelope(body: bytes) -> tuple[str, str]:
    """Extract (ECODE, err) from an error body; empty strings when absent."""
    try:
        data = json.loads(body)
    except ValueError:
        return "", ""
    if not isinstance(data, dict):
        return "", ""
    code = data.get("ECODE") or data.get("code") or ""
    message = data.get("err") or data.get("message") or data.get("error") or ""
    return str(code), str(message)


class Transport:
    """Executes one ClickUp API request at a time; safe for concurrent use.

    ClickUp expects ``Authorization: <key>`` with no ``Bearer`` prefix. The
    OAuth token exchange is the one endpoint that must not carry it.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = (api_key or "").strip()
        self._user_agent = user_agent
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            transport=http_transport,
            timeout=None,
        )

    @property
    def base_url(self) -> str:
        return str(self._http.base_url).rstrip("/")

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _headers(self, path: str) -> dict[str, str]:
        headers = {"User-Agent": self._user_agent, "Accept": "application/json"}
        if self._api_key and path != OAUTH_TOKEN_PATH:
            headers["Authorization"] = self._api_key
        return headers

    def _build_request(
        self,
        method: str,
        path: str,
        query: str,
        body: Any,
        files: dict[str, Any] | None,
    ) -> httpx.Request:
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"unsupported HTTP method: {method}")
        if not path.startswith("/") or "://" in path:
            raise ValueError(f"path must be absolute and relative to the base URL: {path!r}")

        headers = self._headers(path)
        url = f"{path}?{query}" if query else path
        if files is not None:
            return self._http.build_request(method, url, headers=headers, files=files)

        content = _serialize_body(body)
        if content is not None:
            headers["Content-Type"] = "application/json"
        return self._http.build_request(method, url, headers=headers, content=content)

    async def _send(self, request: httpx.Request) -> tuple[int, bytes]:
        response = await self._http.send(request, stream=True)
        try:
            chunks: list[bytes] = []
            size = 0
            async for chunk in response.aiter_bytes():
                size += len(chunk)
                if size > MAX_RESPONSE_BYTES:
                    raise DecodeError(
                        f"response body exceeds {MAX_RESPONSE_BYTES} bytes"
                    )
                chunks.append(chunk)
            return response.status_code, b"".join(chunks)
        finally:
            await response.aclose()

    async def _send_with_deadline(self, request: httpx.Request) -> tuple[int, bytes]:
        expires = _deadline.get()
        if expires is None:
            return await self._send(request)
        remaining = expires - time.monotonic()
        if remaining <= 0:
            raise RequestCancelledError("http request failed: request cancelled: deadline exceeded")
        try:
            return await asyncio.wait_for(self._send(request), remaining)
        except asyncio.TimeoutError as e:
            raise RequestCancelledError(
                "http request failed: request cancelled: deadline exceeded"
            ) from e

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def execute(
        self,
        method: str,
        path: str,
        *,
        query: str = "",
        body: Any = None,
        into: Any = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and decode the response into ``into``.

        Args:
            method: GET, POST, PUT, PATCH or DELETE.
            path: Escaped path starting with ``/`` (see PathBuilder).
            query: Encoded query string without the leading ``?``.
            body: Pydantic model or JSON-compatible value; omitted when None
                or when it serializes to ``null``.
            into: Decode target (model class or typing construct). When
                None the response body is discarded.
            files: Multipart payload, sent instead of a JSON body.

        Returns:
            The decoded payload, or None when ``into`` is None.
        """
        request = self._build_request(method, path, query, body, files)

        try:
            status, content = await self._send_with_deadline(request)
        except httpx.HTTPError as e:
            raise HTTPRequestError(f"http request failed: {e}") from e

        logger.debug("%s %s -> %d", request.method, path, status)

        if not 200 <= status <= 299:
            code, message = _parse_error_envelope(content)
            error_cls = api_error_class(status)
            raise error_cls(
                status,
                code=code,
                error_message=message,
                body=content.decode("utf-8", errors="replace"),
            )

        if into is None:
            return None

        try:
            return _adapter(into).validate_json(content if content.strip() else b"{}")
        except ValidationError as e:
            raise DecodeError(f"decode response: {e}") from e
