"""Security helpers for password hashing and session tokens."""

from datetime import datetime, timedelta, timezone
from hashlib import sha256

from jose import JWTError, jwt
from passlib.context import CryptContext

from harmonia.config import get_settings

# ---- Password hashing (passlib) ----
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)

_ALGORITHM = "HS256"


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def password_signature(password_hash: str) -> str:
    """Return the claim that ties a session token to the current password hash."""

    return sha256(password_hash.encode()).hexdigest()


# ---- Session tokens (JWT) ----


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=_ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, get_settings().secret_key, algorithms=[_ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def create_session_token(user_id: str, password_hash: str) -> str:
    """Issue a session token for ``user_id``."""

    return create_access_token(
        {"sub": user_id, "pwd_sig": password_signature(password_hash)}
    )


__all__ = [
    "create_access_token",
    "create_session_token",
    "decode_access_token",
    "get_password_hash",
    "password_signature",
    "verify_password",
]
