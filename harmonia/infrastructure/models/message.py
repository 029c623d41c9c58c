"""SQLAlchemy model for persisted chat messages."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from harmonia.infrastructure.database import Base
from harmonia.utils import generate_id, now_in_app_naive_datetime


class MessageModel(Base):
    """Database representation of a direct message."""

    __tablename__ = "messages"

    id = Column(String(36), primary_key=True, default=generate_id)
    sender_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    appointment_id = Column(String(36), ForeignKey("appointments.id"), nullable=True)
    content = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="sent")
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )

    sender = relationship("UserModel", foreign_keys=[sender_id], lazy="joined")
    receiver = relationship("UserModel", foreign_keys=[receiver_id], lazy="joined")


__all__ = ["MessageModel"]
