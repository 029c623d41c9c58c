"""End-to-end tests for the realtime websocket channel."""

from __future__ import annotations

import time

import pytest


def _wait_for_authenticated(client, expected: int, timeout: float = 2.0) -> None:
    registry = client.app.state.notification_bridge.registry
    deadline = time.monotonic() + timeout
    while registry.authenticated_count() < expected:
        if time.monotonic() > deadline:
            pytest.fail(f"expected {expected} authenticated connection(s)")
        time.sleep(0.01)


def _wait_for_connections(client, expected: int, timeout: float = 2.0) -> None:
    registry = client.app.state.notification_bridge.registry
    deadline = time.monotonic() + timeout
    while len(registry) != expected:
        if time.monotonic() > deadline:
            pytest.fail(f"expected {expected} registered connection(s)")
        time.sleep(0.01)


def test_posted_message_reaches_sender_and_receiver(client, signup):
    alice = signup("alice@example.com")
    bob = signup("bob@example.com", role="provider")
    client.cookies.clear()

    with client.websocket_connect("/ws") as alice_ws, client.websocket_connect("/ws") as bob_ws:
        alice_ws.send_json({"type": "auth", "userId": alice.id})
        bob_ws.send_json({"type": "auth", "userId": bob.id})
        _wait_for_authenticated(client, 2)

        response = client.post(
            "/api/messages",
            json={"receiverId": bob.id, "content": "hi"},
            headers=alice.headers,
        )
        assert response.status_code == 201
        stored = response.json()

        alice_frame = alice_ws.receive_json()
        bob_frame = bob_ws.receive_json()

    assert alice_frame == bob_frame
    assert alice_frame["type"] == "new_message"
    data = alice_frame["data"]
    assert data["id"] == stored["id"]
    assert data["senderId"] == alice.id
    assert data["receiverId"] == bob.id
    assert data["content"] == "hi"
    assert data["isRead"] is False
    assert data["createdAt"]


def test_malformed_frame_does_not_close_socket(client, signup):
    alice = signup("alice@example.com")
    bob = signup("bob@example.com")
    client.cookies.clear()

    with client.websocket_connect("/ws") as ws:
        ws.send_text("{not json")
        ws.send_json({"type": "ping"})
        ws.send_json({"type": "auth", "userId": bob.id})
        _wait_for_authenticated(client, 1)

        response = client.post(
            "/api/messages",
            json={"receiverId": bob.id, "content": "still there?"},
            headers=alice.headers,
        )
        assert response.status_code == 201
        assert ws.receive_json()["data"]["content"] == "still there?"


def test_message_is_stored_without_live_connections(client, signup):
    alice = signup("alice@example.com")
    bob = signup("bob@example.com")

    response = client.post(
        "/api/messages",
        json={"receiverId": bob.id, "content": "offline"},
        headers=alice.headers,
    )

    assert response.status_code == 201
    thread = client.get(f"/api/messages/{alice.id}", headers=bob.headers).json()
    assert [item["content"] for item in thread] == ["offline"]


def test_closing_socket_unregisters_connection(client, signup):
    alice = signup("alice@example.com")
    client.cookies.clear()

    with client.websocket_connect("/ws") as ws:
        ws.send_json({"type": "auth", "userId": alice.id})
        _wait_for_authenticated(client, 1)

    _wait_for_connections(client, 0)
    assert client.app.state.notification_bridge.registry.authenticated_count() == 0


def test_session_cookie_pins_the_announced_user(client, signup):
    alice = signup("alice@example.com")
    bob = signup("bob@example.com")
    client.cookies.clear()
    registry = client.app.state.notification_bridge.registry

    with client.websocket_connect(
        "/ws", headers={"cookie": f"harmonia_session={bob.token}"}
    ) as ws:
        _wait_for_connections(client, 1)
        ws.send_json({"type": "auth", "userId": alice.id})
        ws.send_json({"type": "auth", "userId": bob.id})
        _wait_for_authenticated(client, 1)

        assert registry.connections_for([alice.id]) == []
        assert len(registry.connections_for([bob.id])) == 1


def test_invalid_session_cookie_falls_back_to_auth_frame(client, signup):
    alice = signup("alice@example.com")
    client.cookies.clear()

    with client.websocket_connect(
        "/ws", headers={"cookie": "harmonia_session=not-a-token"}
    ) as ws:
        ws.send_json({"type": "auth", "userId": alice.id})
        _wait_for_authenticated(client, 1)
