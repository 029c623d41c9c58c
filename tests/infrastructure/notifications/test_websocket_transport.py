"""Tests for the websocket transport adapter."""

from __future__ import annotations

import asyncio

from starlette.websockets import WebSocketState

from harmonia.infrastructure.notifications import WebSocketTransport


class _FakeWebSocket:
    def __init__(self, *, fail: bool = False) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED
        self.fail = fail
        self.sent: list[dict] = []

    async def send_json(self, payload: dict) -> None:
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(payload)


def test_send_schedules_write_on_owning_loop():
    async def scenario():
        websocket = _FakeWebSocket()
        transport = WebSocketTransport(websocket)
        transport.send({"type": "new_message", "data": {}})
        assert websocket.sent == []
        await asyncio.sleep(0)
        return websocket.sent

    assert asyncio.run(scenario()) == [{"type": "new_message", "data": {}}]


def test_failed_write_marks_transport_not_writable():
    async def scenario():
        transport = WebSocketTransport(_FakeWebSocket(fail=True))
        assert transport.is_writable()
        transport.send({"type": "new_message", "data": {}})
        await asyncio.sleep(0)
        return transport.is_writable()

    assert asyncio.run(scenario()) is False


def test_transport_reports_closed_states():
    async def scenario():
        websocket = _FakeWebSocket()
        transport = WebSocketTransport(websocket)
        websocket.client_state = WebSocketState.DISCONNECTED
        disconnected = transport.is_writable()
        websocket.client_state = WebSocketState.CONNECTED
        transport.mark_closed()
        return disconnected, transport.is_writable()

    assert asyncio.run(scenario()) == (False, False)
