"""Fan persisted messages out to the live connections of their participants."""

from __future__ import annotations

import logging

from harmonia.domain.entities import Message

from .connection import Connection, Transport
from .frames import build_new_message_frame, parse_control_frame
from .registry import ConnectionRegistry

logger = logging.getLogger(__name__)


class NotificationBridge:
    """Best-effort wake-up channel for open chat sessions.

    The bridge is not a system of record: every notification is attempted at
    most once, only on connections that are open at call time, and failures are
    never reported back to the caller. Clients recover any missed hint on their
    next REST refetch.

    All methods are synchronous and must be called from the event loop that
    owns the connections.
    """

    def __init__(self, registry: ConnectionRegistry | None = None) -> None:
        self._registry = registry if registry is not None else ConnectionRegistry()

    @property
    def registry(self) -> ConnectionRegistry:
        return self._registry

    def accept_connection(
        self, transport: Transport, *, session_user_id: str | None = None
    ) -> Connection:
        """Register ``transport`` as a new, unauthenticated connection.

        ``session_user_id`` is the user the handshake proved, when the client
        presented a valid session. Auth frames naming anyone else are refused.
        """

        connection = Connection(transport, session_user_id=session_user_id)
        self._registry.add(connection)
        logger.debug("Realtime connection %s accepted", connection.id)
        return connection

    def handle_control_frame(self, connection: Connection, frame: str | bytes) -> bool:
        """Process an inbound control frame.

        Only ``{"type": "auth", "userId": ...}`` is understood. Everything else
        is logged and dropped without closing the connection. Returns ``True``
        when the frame bound (or re-confirmed) the connection's user.
        """

        parsed = parse_control_frame(frame)
        if parsed is None:
            logger.debug("Discarding unrecognised frame on connection %s", connection.id)
            return False

        if connection not in self._registry:
            logger.debug(
                "Ignoring auth frame for closed connection %s", connection.id
            )
            return False

        if (
            connection.session_user_id is not None
            and connection.session_user_id != parsed.user_id
        ):
            logger.warning(
                "Connection %s has a session for user %s; refusing auth as %s",
                connection.id,
                connection.session_user_id,
                parsed.user_id,
            )
            return False

        if not self._registry.bind(connection, parsed.user_id):
            logger.warning(
                "Connection %s is bound to user %s; refusing rebind to %s",
                connection.id,
                connection.user_id,
                parsed.user_id,
            )
            return False

        logger.debug(
            "Connection %s authenticated as user %s", connection.id, parsed.user_id
        )
        return True

    def notify(self, message: Message) -> int:
        """Push ``message`` to the sender's and receiver's open connections.

        Returns the number of connections a delivery was handed to. Connections
        whose transport is not writable are skipped and a failing transport
        never prevents delivery to the others.
        """

        if message.id is None:
            logger.warning("Refusing to broadcast a message that was not persisted")
            return 0

        targets = self._registry.connections_for(
            (message.sender_id, message.receiver_id)
        )
        if not targets:
            return 0

        frame = build_new_message_frame(message)
        delivered = 0
        for connection in targets:
            try:
                if not connection.transport.is_writable():
                    continue
                connection.transport.send(dict(frame))
            except Exception:
                logger.debug(
                    "Delivery to connection %s failed", connection.id, exc_info=True
                )
                continue
            delivered += 1

        logger.debug(
            "Message %s fanned out to %s of %s connection(s)",
            message.id,
            delivered,
            len(targets),
        )
        return delivered

    def on_disconnect(self, connection: Connection) -> None:
        """Drop ``connection`` from the registry. Safe to call repeatedly."""

        if self._registry.remove(connection):
            logger.debug("Realtime connection %s closed", connection.id)

    def shutdown(self) -> None:
        """Forget every registered connection."""

        self._registry.clear()


__all__ = ["NotificationBridge"]
