"""Domain entity representing a direct message between two users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

MESSAGE_STATUS_SENT = "sent"
MESSAGE_STATUS_DELIVERED = "delivered"
MESSAGE_STATUS_READ = "read"


@dataclass(frozen=True)
class Message:
    """Persisted chat message.

    Instances are immutable once loaded; the read flag only changes through the
    repository, which hands back fresh instances.
    """

    id: str | None
    sender_id: str
    receiver_id: str
    content: str
    appointment_id: str | None = None
    status: str = MESSAGE_STATUS_SENT
    is_read: bool = False
    created_at: datetime | None = None


__all__ = [
    "Message",
    "MESSAGE_STATUS_SENT",
    "MESSAGE_STATUS_DELIVERED",
    "MESSAGE_STATUS_READ",
]
