"""Endpoints for account signup, login and session handling."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from harmonia.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
)
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.infrastructure.security import create_session_token
from harmonia.interfaces.api.dependencies import get_current_user
from harmonia.interfaces.api.routes_helpers import (
    clear_session_cookie,
    http_error_from,
    set_session_cookie,
)
from harmonia.interfaces.api.schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    SignupRequest,
    UserRead,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _start_session(response: Response, user: User) -> AuthResponse:
    token = create_session_token(user.id, user.password_hash)
    set_session_cookie(response, token)
    return AuthResponse(user=UserRead.model_validate(user), access_token=token)


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    """Create an account and open a session for it."""

    try:
        user = create_user(
            db,
            email=payload.email,
            password=payload.password,
            first_name=payload.first_name,
            last_name=payload.last_name,
            role=payload.role,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc

    logger.info("User %s signed up as %s", user.id, user.role)
    return _start_session(response, user)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    user, auth_status = authenticate_user(db, payload.email, payload.password)
    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS or user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _start_session(response, user)


@router.get("/user", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")
