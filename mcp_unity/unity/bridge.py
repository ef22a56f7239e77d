"""Single persistent WebSocket connection to the Unity editor."""

from __future__ import annotations

import uuid
import asyncio
import logging
from typing import Any
from collections.abc import Callable, Awaitable

import websockets
from websockets.protocol import State
from websockets.exceptions import ConnectionClosedError

from mcp_unity.state import PendingRequest
from mcp_unity.state.settings import BridgeSettings
from mcp_unity.config.websocket import WS_HEADER_CLIENT_NAME
from mcp_unity.errors import BridgeError, ErrorType, PeerConnectionError, RequestTimeoutError

from .router import route_reply
from .pending import PendingRequests
from .envelope import encode_request

logger = logging.getLogger(__name__)

ConnectFn = Callable[..., Awaitable[Any]]


class UnityBridge:
    """Connect to Unity, multiplex requests over one socket, and repair it.

    At most one socket is live at a time. Every request is registered in a
    table keyed by id before it is sent and leaves that table exactly once:
    on its reply, on its timeout, or when the connection is torn down.
    """

    def __init__(self, settings: BridgeSettings, *, connect_fn: ConnectFn | None = None) -> None:
        self._settings = settings
        self._connect_fn: ConnectFn = connect_fn or websockets.connect
        self._pending = PendingRequests()
        self._connect_lock = asyncio.Lock()
        self._ws: Any | None = None
        self._reader_task: asyncio.Task | None = None
        self._connect_task: asyncio.Task | None = None
        self._background: set[asyncio.Task] = set()
        self._client_name: str | None = None

    @property
    def url(self) -> str:
        return self._settings.url

    @property
    def is_connected(self) -> bool:
        return self._ws is not None and getattr(self._ws, "state", None) is State.OPEN

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def has_pending(self, request_id: str) -> bool:
        return request_id in self._pending

    async def start(self, client_name: str | None = None) -> None:
        try:
            logger.info("Attempting to connect to Unity WebSocket...")
            await self.connect(client_name)
            logger.info("Successfully connected to Unity WebSocket")
            if client_name:
                logger.info("Client identified to Unity as: %s", client_name)
        except PeerConnectionError as exc:
            logger.warning("Could not connect to Unity WebSocket: %s", exc.message)
            logger.warning("Will retry connection on next request")
            await self.disconnect()

    async def stop(self) -> None:
        tasks = list(self._background)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        await self.disconnect()
        logger.info("Unity WebSocket client stopped")

    def _connect_options(self) -> dict[str, Any]:
        client_name = self._client_name or ""
        options: dict[str, Any] = {
            "additional_headers": [(WS_HEADER_CLIENT_NAME, client_name)],
            # The connect timeout is enforced around the whole attempt instead.
            "open_timeout": None,
            "ping_interval": self._settings.ping_interval_s or None,
            "ping_timeout": self._settings.ping_timeout_s,
            "max_size": self._settings.max_message_bytes,
        }
        if client_name:
            options["origin"] = client_name
        return options

    async def _open(self, url: str, options: dict[str, Any]) -> Any:
        return await self._connect_fn(url, **options)

    async def connect(self, client_name: str | None = None) -> None:
        if self.is_connected:
            logger.debug("Already connected to Unity WebSocket")
            return
        if client_name is not None:
            self._client_name = client_name

        async with self._connect_lock:
            # Another caller may have connected while we waited for the lock.
            if self.is_connected:
                return
            await self.disconnect()

            url = self.url
            logger.debug("Connecting to %s...", url)
            task = asyncio.create_task(self._open(url, self._connect_options()))
            self._connect_task = task
            try:
                ws = await asyncio.wait_for(task, timeout=self._settings.connect_timeout_s)
            except TimeoutError:
                logger.warning("Connection timeout, terminating WebSocket")
                await self.disconnect()
                raise PeerConnectionError("Connection timeout") from None
            except asyncio.CancelledError:
                current = asyncio.current_task()
                if current is not None and current.cancelling():
                    raise
                raise PeerConnectionError("Connection aborted") from None
            except Exception as exc:
                logger.error("WebSocket error: %s", exc)
                await self.disconnect()
                raise PeerConnectionError(f"Connection failed: {exc}") from exc

            if self._connect_task is not task:
                # disconnect() ran in the same loop turn the handshake finished.
                await self._close_transport(ws)
                raise PeerConnectionError("Connection aborted")
            self._connect_task = None
            self._ws = ws
            self._reader_task = asyncio.create_task(self._read_loop(ws))
            logger.debug("WebSocket connected")

    async def disconnect(self) -> None:
        # Everything up to the first await runs atomically on the loop, so no
        # reply, timer or caller can observe a half torn-down bridge.
        ws = self._ws
        reader = self._reader_task
        connecting = self._connect_task
        self._ws = None
        self._reader_task = None
        self._connect_task = None

        if reader is not None and reader is not asyncio.current_task():
            reader.cancel()
        if connecting is not None and not connecting.done():
            logger.debug("Aborting in-flight WebSocket connect")
            connecting.cancel()

        self._pending.reject_all(lambda: PeerConnectionError("Connection closed"))

        if ws is None:
            return
        logger.debug("Disconnecting WebSocket in state: %s", getattr(ws, "state", None))
        await self._close_transport(ws)
        if reader is not None and reader is not asyncio.current_task():
            await asyncio.wait({reader})

    async def _close_transport(self, ws: Any) -> None:
        if getattr(ws, "state", None) is not State.OPEN:
            return
        try:
            await ws.close()
        except Exception as exc:
            logger.error("Error closing WebSocket: %s", exc)

    async def reconnect(self) -> None:
        await self.disconnect()
        try:
            await self.connect()
        except PeerConnectionError as exc:
            logger.warning("Reconnect to Unity failed: %s", exc.message)

    def _schedule_reconnect(self) -> None:
        task = asyncio.create_task(self.reconnect())
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def _read_loop(self, ws: Any) -> None:
        try:
            async for message in ws:
                route_reply(self._pending, message)
        except ConnectionClosedError as exc:
            logger.error("WebSocket error: %s", exc)
        except Exception:
            logger.exception("WebSocket reader failed")
        finally:
            if self._ws is ws:
                logger.debug("WebSocket closed")
                await self.disconnect()

    def _expire_request(self, request_id: str, future: asyncio.Future[Any]) -> None:
        entry = self._pending.get(request_id)
        if entry is None or entry.future is not future:
            return
        logger.error("Request %s timed out after %.1fs", request_id, self._settings.request_timeout_s)
        self._pending.reject(request_id, RequestTimeoutError("Request timed out"))
        # A silent peer usually means a dead socket; refresh it for later
        # calls but never replay this request.
        self._schedule_reconnect()

    def _discard(self, request_id: str, future: asyncio.Future[Any]) -> None:
        entry = self._pending.get(request_id)
        if entry is not None and entry.future is future:
            self._pending.pop(request_id)

    async def send_request(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        request_id: str | None = None,
    ) -> Any:
        if not self.is_connected:
            logger.info("Not connected to Unity, connecting first...")
            await self.connect()

        request_id = request_id or str(uuid.uuid4())
        try:
            text = encode_request(request_id, method, params)
        except TypeError as exc:
            raise BridgeError(f"Request params are not serializable: {exc}", error_type=ErrorType.VALIDATION) from exc

        ws = self._ws
        if ws is None or not self.is_connected:
            raise PeerConnectionError("Not connected to Unity")

        loop = asyncio.get_running_loop()
        future: asyncio.Future[Any] = loop.create_future()
        timer = loop.call_later(self._settings.request_timeout_s, self._expire_request, request_id, future)
        try:
            self._pending.add(request_id, PendingRequest(future=future, timer=timer))
        except BridgeError:
            timer.cancel()
            raise

        try:
            await ws.send(text)
        except Exception as exc:
            self._discard(request_id, future)
            if future.done() and not future.cancelled():
                future.exception()
            raise PeerConnectionError(f"Send failed: {exc}") from exc
        logger.debug("Request sent: %s", request_id)

        try:
            return await future
        except asyncio.CancelledError:
            self._discard(request_id, future)
            raise


__all__ = ["ConnectFn", "UnityBridge"]
