"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_PATIENT = "patient"
ROLE_PROVIDER = "provider"
ROLE_ADMIN = "admin"
USER_ROLES = (ROLE_PATIENT, ROLE_PROVIDER, ROLE_ADMIN)


@dataclass
class User:
    """Core attributes describing an application user."""

    id: str | None
    email: str
    password_hash: str
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    role: str
    is_onboarded: bool
    created_at: datetime | None
    updated_at: datetime | None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role.lower() == role.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    @property
    def display_name(self) -> str:
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) or self.email


__all__ = ["User", "ROLE_PATIENT", "ROLE_PROVIDER", "ROLE_ADMIN", "USER_ROLES"]
