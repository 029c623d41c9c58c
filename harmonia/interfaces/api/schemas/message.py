"""Direct message schemas."""

from datetime import datetime

from pydantic import Field

from .auth import UserSummaryRead
from .base import APIModel


class MessageCreate(APIModel):
    receiver_id: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    appointment_id: str | None = None


class MessageRead(APIModel):
    id: str
    sender_id: str
    receiver_id: str
    appointment_id: str | None
    content: str
    status: str
    is_read: bool
    created_at: datetime | None


class MessageDetailRead(MessageRead):
    sender: UserSummaryRead
    receiver: UserSummaryRead
