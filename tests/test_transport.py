"""Transport behaviour against an in-process httpx.MockTransport."""

import asyncio
import logging

import httpx
import pytest

from clickup_cli import transport as transport_module
from clickup_cli.errors import (
    ClickUpAPIError,
    DecodeError,
    EncodeError,
    ForbiddenError,
    HTTPRequestError,
    NotFoundError,
    RateLimitedError,
    RequestCancelledError,
    RequestError,
    ServerError,
    UnauthorizedError,
)
from clickup_cli.models import CreateTaskRequest, Task
from clickup_cli.transport import Transport, deadline

from conftest import BASE_URL, Recorder, no_io


def _transport(handler, api_key="pk_test"):
    return Transport(api_key, base_url=BASE_URL, http_transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_request_headers():
    """The key goes out raw, without a Bearer prefix."""
    rec = Recorder(payload={"id": "abc"})
    async with _transport(rec) as t:
        await t.execute("GET", "/v2/task/abc", into=Task)

    req = rec.last
    assert req.method == "GET"
    assert req.url.path == "/api/v2/task/abc"
    assert req.headers["Authorization"] == "pk_test"
    assert req.headers["Accept"] == "application/json"
    assert req.headers["User-Agent"] == "clickup-cli/1.0"
    assert "Content-Type" not in req.headers


@pytest.mark.asyncio
async def test_oauth_token_path_has_no_authorization():
    rec = Recorder(payload={"access_token": "tok"})
    async with _transport(rec) as t:
        await t.execute("POST", "/v2/oauth/token", body={"code": "c"})
    assert "Authorization" not in rec.last.headers


@pytest.mark.asyncio
async def test_blank_key_sends_no_authorization():
    rec = Recorder()
    async with _transport(rec, api_key="  ") as t:
        await t.execute("GET", "/v2/user")
    assert "Authorization" not in rec.last.headers


@pytest.mark.asyncio
async def test_model_body_omits_none_fields():
    rec = Recorder(payload={"id": "t1", "name": "Write docs"})
    async with _transport(rec) as t:
        task = await t.execute(
            "POST", "/v2/list/1/task",
            body=CreateTaskRequest(name="Write docs", priority=2, notify_all=False),
            into=Task,
        )

    assert rec.last.headers["Content-Type"] == "application/json"
    assert rec.json() == {"name": "Write docs", "priority": 2, "notify_all": False}
    assert task.id == "t1"


@pytest.mark.asyncio
async def test_query_is_appended_verbatim():
    rec = Recorder()
    async with _transport(rec) as t:
        await t.execute("GET", "/v2/team/1/task", query="statuses[]=in%20progress")
    assert rec.last.url.query == b"statuses[]=in%20progress"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status, error_cls",
    [
        (400, RequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (429, RateLimitedError),
        (500, ServerError),
        (503, ServerError),
    ],
)
async def test_status_mapping(status, error_cls):
    rec = Recorder(status=status, payload={"err": "nope", "ECODE": "X_001"})
    async with _transport(rec) as t:
        with pytest.raises(error_cls) as excinfo:
            await t.execute("GET", "/v2/user")

    err = excinfo.value
    assert isinstance(err, ClickUpAPIError)
    assert err.status_code == status
    assert err.code == "X_001"
    assert err.error_message == "nope"
    assert str(err) == f"ClickUp API error {status}: nope (X_001)"


@pytest.mark.asyncio
async def test_error_without_envelope_keeps_raw_body():
    rec = Recorder(status=502, body=b"gateway down")
    async with _transport(rec) as t:
        with pytest.raises(ServerError) as excinfo:
            await t.execute("GET", "/v2/user")

    err = excinfo.value
    assert err.code == ""
    assert err.error_message == ""
    assert err.body == "gateway down"
    assert "gateway down" in str(err)


@pytest.mark.asyncio
async def test_undecodable_success_body():
    rec = Recorder(body=b"<html>not json</html>")
    async with _transport(rec) as t:
        with pytest.raises(DecodeError, match="decode response"):
            await t.execute("GET", "/v2/task/abc", into=Task)


@pytest.mark.asyncio
async def test_empty_success_body_decodes_as_empty_object():
    rec = Recorder(body=b"")
    async with _transport(rec) as t:
        task = await t.execute("GET", "/v2/task/abc", into=Task)
    assert task.id == ""


@pytest.mark.asyncio
async def test_response_is_discarded_without_target():
    rec = Recorder(body=b"ignored, not json")
    async with _transport(rec) as t:
        assert await t.execute("DELETE", "/v2/task/abc") is None


@pytest.mark.asyncio
async def test_oversized_response(monkeypatch):
    monkeypatch.setattr(transport_module, "MAX_RESPONSE_BYTES", 10)
    rec = Recorder(body=b"x" * 64)
    async with _transport(rec) as t:
        with pytest.raises(DecodeError, match="exceeds"):
            await t.execute("GET", "/v2/user", into=dict)


@pytest.mark.asyncio
async def test_network_failure_is_wrapped():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _transport(handler) as t:
        with pytest.raises(HTTPRequestError, match="^http request failed: connection refused"):
            await t.execute("GET", "/v2/user")


@pytest.mark.asyncio
async def test_deadline_cancels_slow_request():
    async def slow(request):
        await asyncio.sleep(5)
        return httpx.Response(200, json={})

    async with _transport(slow) as t:
        with deadline(0.05):
            with pytest.raises(RequestCancelledError, match="deadline exceeded"):
                await t.execute("GET", "/v2/user")


@pytest.mark.asyncio
async def test_expired_deadline_sends_nothing():
    async with _transport(no_io) as t:
        with deadline(0):
            with pytest.raises(RequestCancelledError, match="^http request failed"):
                await t.execute("GET", "/v2/user")


def test_nested_deadline_keeps_earlier_expiry():
    with deadline(0.01):
        outer = transport_module._deadline.get()
        with deadline(60):
            assert transport_module._deadline.get() == outer
    assert transport_module._deadline.get() is None


@pytest.mark.asyncio
async def test_invalid_method_and_path():
    async with _transport(no_io) as t:
        with pytest.raises(ValueError, match="unsupported HTTP method"):
            await t.execute("TRACE", "/v2/user")
        with pytest.raises(ValueError, match="absolute"):
            await t.execute("GET", "v2/user")
        with pytest.raises(ValueError):
            await t.execute("GET", "https://evil.test/v2/user")


@pytest.mark.asyncio
async def test_unserializable_body():
    async with _transport(no_io) as t:
        with pytest.raises(EncodeError, match="marshal request body"):
            await t.execute("POST", "/v2/task", body={"x": object()})


@pytest.mark.asyncio
async def test_multipart_upload():
    rec = Recorder(payload={"id": "att"})
    async with _transport(rec) as t:
        await t.execute(
            "POST", "/v2/task/abc/attachment",
            files={"attachment": ("notes.txt", b"hello")},
        )

    req = rec.last
    assert req.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="attachment"; filename="notes.txt"' in req.content
    assert b"hello" in req.content


@pytest.mark.asyncio
async def test_debug_log_line(caplog):
    rec = Recorder()
    with caplog.at_level(logging.DEBUG, logger="clickup_cli.transport"):
        async with _transport(rec) as t:
            await t.execute("GET", "/v2/user")
    assert "GET /v2/user -> 200" in caplog.text
