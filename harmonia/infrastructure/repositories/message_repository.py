"""Persistence helpers for chat messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from harmonia.domain.entities import (
    MESSAGE_STATUS_READ,
    Message,
    MessageWithParticipants,
)
from harmonia.infrastructure.models import MessageModel
from harmonia.utils import ensure_app_naive_datetime, ensure_app_timezone

from .user_repository import UserRepository

RECENT_MESSAGES_LIMIT = 20


class MessageRepository:
    """Provide persistence operations for :class:`Message` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: Message) -> Message:
        model = MessageModel(
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            appointment_id=message.appointment_id,
            content=message.content,
            status=message.status,
            is_read=message.is_read,
        )
        if message.created_at is not None:
            model.created_at = ensure_app_naive_datetime(message.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_thread(self, user_id: str, other_user_id: str) -> Sequence[MessageWithParticipants]:
        """Return the conversation between two users, oldest first."""

        query = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    and_(
                        MessageModel.sender_id == user_id,
                        MessageModel.receiver_id == other_user_id,
                    ),
                    and_(
                        MessageModel.sender_id == other_user_id,
                        MessageModel.receiver_id == user_id,
                    ),
                )
            )
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
        )
        return [self._to_detail(model) for model in query.all()]

    def list_recent(
        self, user_id: str, *, limit: int = RECENT_MESSAGES_LIMIT
    ) -> Sequence[MessageWithParticipants]:
        query = (
            self.session.query(MessageModel)
            .filter(
                or_(MessageModel.sender_id == user_id, MessageModel.receiver_id == user_id)
            )
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .limit(limit)
        )
        return [self._to_detail(model) for model in query.all()]

    def mark_as_read(self, *, receiver_id: str, sender_id: str) -> int:
        """Flag unread messages from ``sender_id`` to ``receiver_id`` as read."""

        updated = (
            self.session.query(MessageModel)
            .filter(
                MessageModel.receiver_id == receiver_id,
                MessageModel.sender_id == sender_id,
                MessageModel.is_read.is_(False),
            )
            .update(
                {MessageModel.is_read: True, MessageModel.status: MESSAGE_STATUS_READ},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            receiver_id=model.receiver_id,
            appointment_id=model.appointment_id,
            content=model.content,
            status=model.status,
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
        )

    @classmethod
    def _to_detail(cls, model: MessageModel) -> MessageWithParticipants:
        return MessageWithParticipants(
            message=cls._to_entity(model),
            sender=UserRepository.to_entity(model.sender),
            receiver=UserRepository.to_entity(model.receiver),
        )


__all__ = ["MessageRepository", "RECENT_MESSAGES_LIMIT"]
