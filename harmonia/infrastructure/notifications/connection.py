"""Live connection handles tracked by the notification bridge."""

from __future__ import annotations

import itertools
from typing import Any, Protocol

_connection_ids = itertools.count(1)


class Transport(Protocol):
    """Push-capable channel owned by the web server."""

    def is_writable(self) -> bool:
        """Return ``True`` while frames can still be written to the peer."""

    def send(self, payload: dict[str, Any]) -> None:
        """Queue ``payload`` for delivery without waiting for the write."""


class Connection:
    """A client's live channel plus the user it authenticated as.

    The transport is borrowed: its lifetime belongs to the web server, the
    connection only keeps a reference for routing.
    """

    __slots__ = ("id", "transport", "session_user_id", "_user_id")

    def __init__(self, transport: Transport, session_user_id: str | None = None) -> None:
        self.id = next(_connection_ids)
        self.transport = transport
        # User proven by the handshake cookie, if any.
        self.session_user_id = session_user_id
        self._user_id: str | None = None

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def is_authenticated(self) -> bool:
        return self._user_id is not None

    def bind(self, user_id: str) -> bool:
        """Associate ``user_id`` with this connection.

        Returns ``False`` when the connection is already bound to a different
        user; the first binding is kept for the connection's lifetime.
        """

        if self._user_id is None:
            self._user_id = user_id
            return True
        return self._user_id == user_id

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"Connection(id={self.id}, user_id={self._user_id!r})"


__all__ = ["Connection", "Transport"]
