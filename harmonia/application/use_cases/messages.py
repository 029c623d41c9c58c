"""Use cases for direct messages between users."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from harmonia.domain.entities import Message, MessageWithParticipants
from harmonia.infrastructure.repositories import MessageRepository

from .users import get_user


def send_message(
    session: Session,
    *,
    sender_id: str,
    receiver_id: str,
    content: str,
    appointment_id: str | None = None,
) -> Message:
    """Persist a message from ``sender_id`` to ``receiver_id``.

    The returned message carries its storage identifier and creation time and
    is the value handed to the realtime bridge.
    """

    if not content or not content.strip():
        raise ValueError("Message content cannot be empty")
    get_user(session, receiver_id)

    message = Message(
        id=None,
        sender_id=sender_id,
        receiver_id=receiver_id,
        content=content,
        appointment_id=appointment_id,
    )
    return MessageRepository(session).create(message)


def get_thread(
    session: Session, *, user_id: str, other_user_id: str
) -> Sequence[MessageWithParticipants]:
    """Return the conversation with ``other_user_id`` and mark it read."""

    repository = MessageRepository(session)
    thread = repository.list_thread(user_id, other_user_id)
    repository.mark_as_read(receiver_id=user_id, sender_id=other_user_id)
    return thread


def list_recent_messages(session: Session, *, user_id: str) -> Sequence[MessageWithParticipants]:
    return MessageRepository(session).list_recent(user_id)


__all__ = ["get_thread", "list_recent_messages", "send_message"]
