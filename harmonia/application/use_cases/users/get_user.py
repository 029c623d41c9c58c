"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from harmonia.domain.entities import User
from harmonia.domain.errors import ResourceNotFoundError
from harmonia.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: str) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise ResourceNotFoundError("User not found")
    return user
