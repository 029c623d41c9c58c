"""In-memory registry of live connections grouped by user."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from typing import DefaultDict

from .connection import Connection


class ConnectionRegistry:
    """Track open connections and index the authenticated ones by user.

    Only touched from the event loop, so no locking is involved. Insertion order
    is preserved both globally and per user.
    """

    def __init__(self) -> None:
        self._connections: dict[int, Connection] = {}
        self._by_user: DefaultDict[str, dict[int, Connection]] = defaultdict(dict)

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, connection: object) -> bool:
        return (
            isinstance(connection, Connection)
            and self._connections.get(connection.id) is connection
        )

    def add(self, connection: Connection) -> None:
        """Register ``connection``; authenticated connections are indexed at once."""

        self._connections[connection.id] = connection
        if connection.user_id is not None:
            self._by_user[connection.user_id][connection.id] = connection

    def bind(self, connection: Connection, user_id: str) -> bool:
        """Bind ``connection`` to ``user_id`` and index it for routing."""

        if connection not in self:
            return False
        if not connection.bind(user_id):
            return False
        self._by_user[user_id][connection.id] = connection
        return True

    def remove(self, connection: Connection) -> bool:
        """Forget ``connection``. Returns ``False`` if it was not registered."""

        if self._connections.get(connection.id) is not connection:
            return False
        del self._connections[connection.id]
        user_id = connection.user_id
        if user_id is not None:
            connections = self._by_user.get(user_id)
            if connections is not None:
                connections.pop(connection.id, None)
                if not connections:
                    self._by_user.pop(user_id, None)
        return True

    def connections_for(self, user_ids: Iterable[str | None]) -> list[Connection]:
        """Return authenticated connections bound to any of ``user_ids``.

        Each connection appears once, in registration order.
        """

        matches: dict[int, Connection] = {}
        for user_id in user_ids:
            if not user_id:
                continue
            matches.update(self._by_user.get(user_id, {}))
        return [matches[connection_id] for connection_id in sorted(matches)]

    def authenticated_count(self) -> int:
        return sum(len(connections) for connections in self._by_user.values())

    def clear(self) -> None:
        self._connections.clear()
        self._by_user.clear()


__all__ = ["ConnectionRegistry"]
