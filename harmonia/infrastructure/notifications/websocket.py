"""Starlette websocket adapter used as a bridge transport."""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from typing import Any

from fastapi import WebSocket
from starlette.websockets import WebSocketState

logger = logging.getLogger(__name__)


class WebSocketTransport:
    """Write frames to a FastAPI websocket without blocking the caller.

    Each ``send`` is scheduled as its own task on the loop that accepted the
    socket, so a slow peer only delays its own frames.
    """

    def __init__(
        self, websocket: WebSocket, loop: asyncio.AbstractEventLoop | None = None
    ) -> None:
        self._websocket = websocket
        self._loop = loop or asyncio.get_running_loop()
        self._closed = False
        self._pending: set[asyncio.Future[None] | concurrent.futures.Future[None]] = set()

    def is_writable(self) -> bool:
        return (
            not self._closed
            and not self._loop.is_closed()
            and self._websocket.client_state == WebSocketState.CONNECTED
            and self._websocket.application_state == WebSocketState.CONNECTED
        )

    def send(self, payload: dict[str, Any]) -> None:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        future: asyncio.Future[None] | concurrent.futures.Future[None]
        if running is self._loop:
            future = self._loop.create_task(self._send(payload))
        else:
            future = asyncio.run_coroutine_threadsafe(self._send(payload), self._loop)
        self._pending.add(future)
        future.add_done_callback(self._pending.discard)

    def mark_closed(self) -> None:
        self._closed = True

    async def _send(self, payload: dict[str, Any]) -> None:
        if self._closed:
            return
        try:
            await self._websocket.send_json(payload)
        except Exception:
            self._closed = True
            logger.debug("Websocket write failed; marking transport closed", exc_info=True)


__all__ = ["WebSocketTransport"]
