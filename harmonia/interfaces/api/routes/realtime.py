"""Websocket endpoint feeding chat clients with new-message notifications."""

import logging

import anyio
from fastapi import APIRouter, HTTPException, WebSocket

from harmonia.config import get_settings
from harmonia.infrastructure.database import SessionLocal
from harmonia.infrastructure.notifications import NotificationBridge, WebSocketTransport
from harmonia.interfaces.api.dependencies import resolve_current_user

router = APIRouter(tags=["realtime"])
settings = get_settings()
logger = logging.getLogger(__name__)


def _session_user_id(token: str | None) -> str | None:
    """Return the user owning the handshake's session cookie, if it is valid."""

    if not token:
        return None
    db = SessionLocal()
    try:
        return resolve_current_user(token, db).id
    except HTTPException:
        logger.debug("Ignoring invalid session cookie on websocket handshake")
        return None
    finally:
        db.close()


@router.websocket(settings.websocket_path)
async def realtime_websocket(websocket: WebSocket) -> None:
    """Keep a socket registered with the bridge until the peer goes away.

    Clients announce themselves with ``{"type": "auth", "userId": ...}`` and
    then only listen; any other inbound frame is ignored. When the handshake
    carries a valid session cookie, only that user may be announced.
    """

    bridge: NotificationBridge = websocket.app.state.notification_bridge
    session_user_id = await anyio.to_thread.run_sync(
        _session_user_id, websocket.cookies.get(settings.session_cookie_name)
    )
    await websocket.accept()
    transport = WebSocketTransport(websocket)
    connection = bridge.accept_connection(transport, session_user_id=session_user_id)
    try:
        while True:
            event = await websocket.receive()
            if event["type"] == "websocket.disconnect":
                break
            frame = event.get("text")
            if frame is None:
                frame = event.get("bytes")
            if frame is not None:
                bridge.handle_control_frame(connection, frame)
    finally:
        transport.mark_closed()
        bridge.on_disconnect(connection)
