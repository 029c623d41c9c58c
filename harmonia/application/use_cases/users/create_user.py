"""Use case for registering users."""

from sqlalchemy.orm import Session

from harmonia.domain.entities import ROLE_PATIENT, USER_ROLES, User
from harmonia.infrastructure.repositories import UserRepository
from harmonia.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    email: str,
    password: str,
    first_name: str | None = None,
    last_name: str | None = None,
    role: str = ROLE_PATIENT,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        raise ValueError("User already exists with this email")

    normalized_role = role.lower()
    if normalized_role not in USER_ROLES:
        raise ValueError(f"Unknown role '{role}'")

    user = User(
        id=None,
        email=email,
        password_hash=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        profile_image_url=None,
        role=normalized_role,
        is_onboarded=False,
        created_at=None,
        updated_at=None,
    )
    return repository.create(user)
