"""Unit tests for the realtime notification bridge."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

import pytest

from harmonia.domain.entities import Message
from harmonia.infrastructure.notifications import ConnectionRegistry, NotificationBridge


class FakeTransport:
    """Transport double recording every frame handed to it."""

    def __init__(self, *, writable: bool = True, fail: bool = False) -> None:
        self.writable = writable
        self.fail = fail
        self.frames: list[dict] = []

    def is_writable(self) -> bool:
        return self.writable

    def send(self, payload: dict) -> None:
        if self.fail:
            raise ConnectionResetError("peer went away")
        self.frames.append(payload)


def _auth(user_id: str) -> str:
    return json.dumps({"type": "auth", "userId": user_id})


def _message(sender: str = "u1", receiver: str = "u2", **overrides) -> Message:
    values = {
        "id": "m-1",
        "sender_id": sender,
        "receiver_id": receiver,
        "content": "hi",
        "created_at": datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return Message(**values)


@pytest.fixture()
def bridge() -> NotificationBridge:
    return NotificationBridge()


def _connect(bridge: NotificationBridge, user_id: str | None = None, **kwargs):
    transport = FakeTransport(**kwargs)
    connection = bridge.accept_connection(transport)
    if user_id is not None:
        assert bridge.handle_control_frame(connection, _auth(user_id)) is True
    return connection, transport


def test_new_bridge_starts_with_empty_registry():
    bridge = NotificationBridge()
    assert len(bridge.registry) == 0


def test_accepted_connection_is_registered_but_unauthenticated(bridge):
    connection, _ = _connect(bridge)

    assert connection in bridge.registry
    assert connection.user_id is None
    assert bridge.registry.authenticated_count() == 0


def test_notify_reaches_sender_and_receiver_only(bridge):
    _, transport_a = _connect(bridge, "u1")
    _, transport_b = _connect(bridge, "u2")
    _, transport_c = _connect(bridge, "u3")

    delivered = bridge.notify(_message())

    assert delivered == 2
    assert len(transport_a.frames) == 1
    assert len(transport_b.frames) == 1
    assert transport_c.frames == []
    frame = transport_a.frames[0]
    assert frame == transport_b.frames[0]
    assert frame["type"] == "new_message"
    assert frame["data"]["content"] == "hi"
    assert frame["data"]["senderId"] == "u1"
    assert frame["data"]["receiverId"] == "u2"
    assert frame["data"]["isRead"] is False
    assert frame["data"]["createdAt"] == "2024-05-01T12:30:00+00:00"


def test_unauthenticated_connection_never_receives(bridge):
    _, anonymous = _connect(bridge)
    _connect(bridge, "u1")

    bridge.notify(_message())

    assert anonymous.frames == []


def test_every_connection_of_a_user_receives_once(bridge):
    _, first = _connect(bridge, "u2")
    _, second = _connect(bridge, "u2")

    assert bridge.notify(_message()) == 2
    assert len(first.frames) == 1
    assert len(second.frames) == 1


def test_message_to_self_is_delivered_once_per_connection(bridge):
    _, transport = _connect(bridge, "u1")

    assert bridge.notify(_message(sender="u1", receiver="u1")) == 1
    assert len(transport.frames) == 1


def test_non_writable_transport_is_skipped(bridge):
    _, closed = _connect(bridge, "u1", writable=False)
    _, open_ = _connect(bridge, "u2")

    assert bridge.notify(_message()) == 1
    assert closed.frames == []
    assert len(open_.frames) == 1


def test_failing_transport_does_not_affect_others(bridge):
    _connect(bridge, "u1", fail=True)
    _, healthy = _connect(bridge, "u2")

    assert bridge.notify(_message()) == 1
    assert len(healthy.frames) == 1


def test_notify_without_listeners_is_a_no_op(bridge):
    _connect(bridge, "u3")

    assert bridge.notify(_message()) == 0


def test_unpersisted_message_is_not_broadcast(bridge, caplog):
    _, transport = _connect(bridge, "u1")

    with caplog.at_level(logging.WARNING):
        assert bridge.notify(_message(id=None)) == 0

    assert transport.frames == []
    assert "not persisted" in caplog.text


@pytest.mark.parametrize(
    "frame",
    [
        "not json",
        "[]",
        '"auth"',
        json.dumps({"type": "ping"}),
        json.dumps({"type": "auth"}),
        json.dumps({"type": "auth", "userId": ""}),
        json.dumps({"type": "auth", "userId": 42}),
        b"\xff\xfe",
    ],
)
def test_malformed_frame_leaves_connection_unauthenticated(bridge, frame):
    connection, transport = _connect(bridge)

    assert bridge.handle_control_frame(connection, frame) is False
    assert connection in bridge.registry
    assert connection.user_id is None

    assert bridge.handle_control_frame(connection, _auth("u1")) is True
    bridge.notify(_message())
    assert len(transport.frames) == 1


def test_auth_frame_accepts_bytes_and_extra_keys(bridge):
    connection, _ = _connect(bridge)
    frame = json.dumps({"type": "auth", "userId": "u1", "token": "ignored"}).encode()

    assert bridge.handle_control_frame(connection, frame) is True
    assert connection.user_id == "u1"


def test_rebinding_to_another_user_is_refused(bridge):
    connection, transport = _connect(bridge, "u1")

    assert bridge.handle_control_frame(connection, _auth("u1")) is True
    assert bridge.handle_control_frame(connection, _auth("u9")) is False
    assert connection.user_id == "u1"

    bridge.notify(_message(sender="u9", receiver="u8"))
    assert transport.frames == []


def test_auth_frame_must_match_handshake_session(bridge, caplog):
    transport = FakeTransport()
    connection = bridge.accept_connection(transport, session_user_id="u1")

    with caplog.at_level(logging.WARNING):
        assert bridge.handle_control_frame(connection, _auth("u2")) is False
    assert not connection.is_authenticated
    assert "refusing auth" in caplog.text

    assert bridge.handle_control_frame(connection, _auth("u1")) is True
    assert bridge.notify(_message(sender="u2", receiver="u1")) == 1


def test_disconnect_removes_connection_and_is_idempotent(bridge):
    connection, transport = _connect(bridge, "u1")

    bridge.on_disconnect(connection)
    bridge.on_disconnect(connection)

    assert connection not in bridge.registry
    assert bridge.notify(_message()) == 0
    assert transport.frames == []


def test_auth_after_disconnect_is_ignored(bridge):
    connection, _ = _connect(bridge)
    bridge.on_disconnect(connection)

    assert bridge.handle_control_frame(connection, _auth("u1")) is False
    assert bridge.registry.authenticated_count() == 0


def test_disconnect_of_unknown_connection_is_a_no_op(bridge):
    other = NotificationBridge()
    stranger = other.accept_connection(FakeTransport())
    _connect(bridge, "u1")

    bridge.on_disconnect(stranger)

    assert len(bridge.registry) == 1


def test_shutdown_clears_registry():
    registry = ConnectionRegistry()
    bridge = NotificationBridge(registry)
    _connect(bridge, "u1")
    _connect(bridge)

    bridge.shutdown()

    assert len(registry) == 0
    assert bridge.notify(_message()) == 0


def test_disconnected_receiver_does_not_block_sender_delivery(bridge):
    _, sender_transport = _connect(bridge, "u1")
    receiver, receiver_transport = _connect(bridge, "u2")

    bridge.on_disconnect(receiver)

    assert bridge.notify(_message()) == 1
    assert len(sender_transport.frames) == 1
    assert receiver_transport.frames == []
