from __future__ import annotations

import asyncio

import orjson
import pytest

from mcp_unity.state import PendingRequest
from mcp_unity.errors import ToolExecutionError
from mcp_unity.unity import PendingRequests, parse_reply, route_reply


def test_parse_reply_result() -> None:
    reply = parse_reply(orjson.dumps({"id": "r1", "result": {"success": True}}))
    assert reply.request_id == "r1"
    assert reply.result == {"success": True}
    assert reply.error is None


def test_parse_reply_error_defaults() -> None:
    reply = parse_reply('{"id": "r1", "error": {"details": [1]}}')
    assert reply.error is not None
    assert reply.error.message == "Unknown error"
    assert reply.error.details == [1]


def test_parse_reply_string_error() -> None:
    reply = parse_reply('{"id": "r1", "error": "menu item not found"}')
    assert reply.error is not None
    assert reply.error.message == "menu item not found"


def test_parse_reply_falsy_error_is_success() -> None:
    reply = parse_reply('{"id": "r1", "error": null, "result": 3}')
    assert reply.error is None
    assert reply.result == 3


@pytest.mark.parametrize("error", ["{}", "[]", "true", "1"])
def test_parse_reply_empty_error_is_failure(error: str) -> None:
    reply = parse_reply(f'{{"id": "r1", "error": {error}, "result": 3}}')
    assert reply.error is not None
    assert reply.error.message == "Unknown error"
    assert reply.result is None


@pytest.mark.parametrize("error", ["false", '""', "0"])
def test_parse_reply_blank_error_is_success(error: str) -> None:
    reply = parse_reply(f'{{"id": "r1", "error": {error}, "result": 3}}')
    assert reply.error is None
    assert reply.result == 3


@pytest.mark.parametrize("raw", ['{"result": 1}', '{"id": 7, "result": 1}', '{"id": "", "result": 1}'])
def test_parse_reply_without_usable_id(raw: str) -> None:
    assert parse_reply(raw).request_id is None


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        b"\xff\xfe",
        "[]",
        '"id"',
        "",
    ],
)
def test_parse_reply_invalid(raw: str | bytes) -> None:
    with pytest.raises(ValueError):
        parse_reply(raw)


def _register(table: PendingRequests, request_id: str) -> asyncio.Future:
    loop = asyncio.get_running_loop()
    future = loop.create_future()
    table.add(request_id, PendingRequest(future=future, timer=loop.call_later(60, lambda: None)))
    return future


@pytest.mark.asyncio
async def test_route_reply_resolves_matching_entry() -> None:
    table = PendingRequests()
    future = _register(table, "A")
    other = _register(table, "B")

    assert route_reply(table, '{"id": "A", "result": {"logs": []}}') is True
    assert await future == {"logs": []}
    assert not other.done()
    assert table.ids() == ["B"]
    table.pop("B")


@pytest.mark.asyncio
async def test_route_reply_rejects_with_unity_error() -> None:
    table = PendingRequests()
    future = _register(table, "A")

    route_reply(table, orjson.dumps({"id": "A", "error": {"message": "boom", "details": {"code": 2}}}))

    with pytest.raises(ToolExecutionError) as exc:
        await future
    assert exc.value.message == "boom"
    assert exc.value.details == {"code": 2}
    assert str(exc.value) == "tool_execution: boom"


@pytest.mark.asyncio
async def test_route_reply_ignores_unknown_and_late_ids() -> None:
    table = PendingRequests()
    future = _register(table, "A")

    assert route_reply(table, '{"id": "ghost", "result": 1}') is False
    assert route_reply(table, '{"result": 1}') is False
    assert not future.done()

    table.resolve("A", "first")
    assert route_reply(table, '{"id": "A", "result": "second"}') is False
    assert await future == "first"


@pytest.mark.asyncio
async def test_route_reply_drops_malformed_frames(caplog: pytest.LogCaptureFixture) -> None:
    table = PendingRequests()
    future = _register(table, "A")

    with caplog.at_level("ERROR"):
        assert route_reply(table, "{oops") is False
        assert route_reply(table, "[1, 2]") is False

    assert "Error parsing WebSocket message" in caplog.text
    assert not future.done()
    assert len(table) == 1
    table.pop("A")
