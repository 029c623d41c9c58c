"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from harmonia.config import get_settings
from harmonia.domain.entities import ROLE_PROVIDER, User
from harmonia.infrastructure.database import get_db
from harmonia.infrastructure.notifications import NotificationBridge
from harmonia.infrastructure.repositories import UserRepository
from harmonia.infrastructure.security import decode_access_token, password_signature

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


def _unauthorized(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided session token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized("Invalid credentials") from exc

    user_id = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(user_id, str) or not isinstance(signature_claim, str):
        raise _unauthorized("Invalid credentials")

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _unauthorized("User not found")

    # Tokens issued before a password change stop working.
    if signature_claim != password_signature(user.password_hash):
        raise _unauthorized("Invalid credentials")

    return user


def get_current_user(
    request: Request,
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the user owning the bearer token or the session cookie."""

    token = token or request.cookies.get(get_settings().session_cookie_name)
    if not token:
        raise _unauthorized()
    return resolve_current_user(token, db)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def require_provider(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.has_role(ROLE_PROVIDER):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Provider access required",
        )
    return current_user


def get_notification_bridge(request: Request) -> NotificationBridge:
    """Return the realtime bridge owned by the running application."""

    return request.app.state.notification_bridge
