"""Direct messaging routes.

Creating a message persists it first and then hands the stored row to the
realtime bridge, which wakes up any open chat sessions of both participants.
"""

import logging
from functools import partial

import anyio
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from harmonia.application.use_cases.messages import (
    get_thread,
    list_recent_messages,
    send_message,
)
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.infrastructure.notifications import NotificationBridge
from harmonia.interfaces.api.dependencies import get_current_user, get_notification_bridge
from harmonia.interfaces.api.routes_helpers import http_error_from, message_detail_to_read
from harmonia.interfaces.api.schemas import MessageCreate, MessageDetailRead, MessageRead

router = APIRouter(prefix="/api/messages", tags=["messages"])
logger = logging.getLogger(__name__)


@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def create_message(
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    bridge: NotificationBridge = Depends(get_notification_bridge),
) -> MessageRead:
    """Store a message from the caller and notify both participants.

    The response does not depend on whether any live connection received the
    notification.
    """

    try:
        message = await anyio.to_thread.run_sync(
            partial(
                send_message,
                db,
                sender_id=current_user.id,
                receiver_id=payload.receiver_id,
                content=payload.content,
                appointment_id=payload.appointment_id,
            )
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    except SQLAlchemyError as exc:
        logger.exception("Failed to store message from user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send message",
        ) from exc

    delivered = bridge.notify(message)
    logger.debug("Message %s pushed to %s live connection(s)", message.id, delivered)
    return MessageRead.model_validate(message)


@router.get("", response_model=list[MessageDetailRead])
def read_recent_messages(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[MessageDetailRead]:
    messages = list_recent_messages(db, user_id=current_user.id)
    return [message_detail_to_read(detail) for detail in messages]


@router.get("/{user_id}", response_model=list[MessageDetailRead])
def read_conversation(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[MessageDetailRead]:
    """Return the thread with ``user_id`` oldest first and mark it read."""

    thread = get_thread(db, user_id=current_user.id, other_user_id=user_id)
    return [message_detail_to_read(detail) for detail in thread]
