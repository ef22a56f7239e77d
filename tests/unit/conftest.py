from __future__ import annotations

import asyncio
from typing import Any
from collections.abc import Callable

import orjson
import pytest
from websockets.protocol import State

from mcp_unity.unity import UnityBridge
from mcp_unity.state.settings import BridgeSettings

_CLOSED = object()


class FakeWebSocket:
    """In-memory stand-in for a websockets client connection."""

    def __init__(self, url: str, options: dict[str, Any]) -> None:
        self.url = url
        self.options = options
        self.state = State.OPEN
        self.close_calls = 0
        self.fail_send: Exception | None = None
        self._inbox: asyncio.Queue[Any] = asyncio.Queue()
        self._sent: asyncio.Queue[dict[str, Any]] = asyncio.Queue()

    async def send(self, text: str) -> None:
        if self.fail_send is not None:
            raise self.fail_send
        self._sent.put_nowait(orjson.loads(text))

    async def next_sent(self, timeout: float = 1.0) -> dict[str, Any]:
        return await asyncio.wait_for(self._sent.get(), timeout=timeout)

    def reply(self, payload: Any) -> None:
        self._inbox.put_nowait(payload if isinstance(payload, (str, bytes)) else orjson.dumps(payload))

    def drop(self) -> None:
        """Simulate Unity closing the socket."""
        self.state = State.CLOSED
        self._inbox.put_nowait(_CLOSED)

    async def close(self) -> None:
        self.close_calls += 1
        self.state = State.CLOSED
        self._inbox.put_nowait(_CLOSED)

    def __aiter__(self) -> FakeWebSocket:
        return self

    async def __anext__(self) -> Any:
        item = await self._inbox.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        return item


class FakeUnity:
    """Connect function handing out FakeWebSocket instances."""

    def __init__(self) -> None:
        self.sockets: list[FakeWebSocket] = []
        self.connect_calls = 0
        self.fail: Exception | None = None
        self.hang = False

    async def connect(self, url: str, **options: Any) -> FakeWebSocket:
        self.connect_calls += 1
        if self.hang:
            await asyncio.Event().wait()
        if self.fail is not None:
            raise self.fail
        ws = FakeWebSocket(url, options)
        self.sockets.append(ws)
        return ws

    @property
    def ws(self) -> FakeWebSocket:
        return self.sockets[-1]


def make_settings(**overrides: Any) -> BridgeSettings:
    values: dict[str, Any] = {
        "host": "localhost",
        "port": 8090,
        "path": "/McpUnity",
        "client_name": "",
        "connect_timeout_s": 0.2,
        "request_timeout_s": 0.2,
        "ping_interval_s": 0.0,
        "ping_timeout_s": 20.0,
        "max_message_bytes": 1 << 20,
    }
    values.update(overrides)
    return BridgeSettings(**values)


@pytest.fixture
def fake_unity() -> FakeUnity:
    return FakeUnity()


@pytest.fixture
def make_bridge(fake_unity: FakeUnity) -> Callable[..., UnityBridge]:
    def _make(**overrides: Any) -> UnityBridge:
        return UnityBridge(make_settings(**overrides), connect_fn=fake_unity.connect)

    return _make


@pytest.fixture
def wait_until() -> Callable[..., Any]:
    async def _wait(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while not predicate():
            if loop.time() > deadline:
                raise AssertionError("condition not reached in time")
            await asyncio.sleep(0.005)

    return _wait
