"""Wire frames exchanged over the realtime notification channel."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from harmonia.domain.entities import Message

NEW_MESSAGE_FRAME_TYPE = "new_message"


class AuthFrame(BaseModel):
    """Client → server handshake naming the user behind the connection."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Literal["auth"]
    user_id: str = Field(alias="userId", min_length=1)


class NewMessageFrame(BaseModel):
    """Server → client hint that a message was persisted."""

    model_config = ConfigDict(frozen=True)

    type: Literal["new_message"] = NEW_MESSAGE_FRAME_TYPE
    data: dict[str, Any]


def parse_control_frame(raw: str | bytes) -> AuthFrame | None:
    """Decode an inbound frame, returning ``None`` when it should be discarded.

    Invalid JSON, non-object payloads, unknown ``type`` values and auth frames
    without a usable ``userId`` are all discarded.
    """

    try:
        return AuthFrame.model_validate_json(raw)
    except (ValidationError, UnicodeDecodeError):
        return None


def serialize_message(message: Message) -> dict[str, Any]:
    """Return the JSON representation of ``message`` shared with REST clients."""

    return {
        "id": message.id,
        "senderId": message.sender_id,
        "receiverId": message.receiver_id,
        "appointmentId": message.appointment_id,
        "content": message.content,
        "status": message.status,
        "isRead": message.is_read,
        "createdAt": _isoformat(message.created_at),
    }


def build_new_message_frame(message: Message) -> dict[str, Any]:
    """Return the outbound frame announcing ``message``."""

    return NewMessageFrame(data=serialize_message(message)).model_dump()


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


__all__ = [
    "AuthFrame",
    "NEW_MESSAGE_FRAME_TYPE",
    "NewMessageFrame",
    "build_new_message_frame",
    "parse_control_frame",
    "serialize_message",
]
