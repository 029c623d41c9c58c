"""Administrative views over the user base."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from harmonia.domain.entities import UserStats, UserWithProfiles
from harmonia.infrastructure.repositories import (
    AppointmentRepository,
    PatientProfileRepository,
    ProviderProfileRepository,
    UserRepository,
)


def list_users_with_profiles(session: Session) -> Sequence[UserWithProfiles]:
    return UserRepository(session).list_with_profiles()


def get_user_stats(session: Session) -> UserStats:
    """Return platform-wide totals for the admin dashboard."""

    return UserStats(
        total_users=UserRepository(session).count(),
        total_patients=PatientProfileRepository(session).count(),
        total_providers=ProviderProfileRepository(session).count(),
        total_appointments=AppointmentRepository(session).count(),
    )


__all__ = ["get_user_stats", "list_users_with_profiles"]
