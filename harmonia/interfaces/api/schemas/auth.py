"""Authentication related schemas."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from harmonia.domain.entities import ROLE_PATIENT, ROLE_PROVIDER

from .base import APIModel

_SELF_SERVICE_ROLES = (ROLE_PATIENT, ROLE_PROVIDER)


class SignupRequest(APIModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: str = ROLE_PATIENT

    @field_validator("role")
    @classmethod
    def _check_role(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _SELF_SERVICE_ROLES:
            raise ValueError("Role must be 'patient' or 'provider'")
        return normalized


class LoginRequest(APIModel):
    email: EmailStr
    password: str


class UserRead(APIModel):
    id: str
    email: EmailStr
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    role: str
    is_onboarded: bool
    created_at: datetime | None
    updated_at: datetime | None


class UserSummaryRead(APIModel):
    """Public subset of a user shown next to messages, reviews and listings."""

    id: str
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    role: str


class AuthResponse(APIModel):
    user: UserRead
    access_token: str
    token_type: str = "bearer"
