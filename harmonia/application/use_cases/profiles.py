"""Use cases for patient and provider onboarding and profile edits."""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Mapping

from sqlalchemy.orm import Session

from harmonia.domain.entities import (
    ROLE_PATIENT,
    ROLE_PROVIDER,
    PatientProfile,
    ProviderProfile,
    User,
)
from harmonia.domain.errors import ResourceNotFoundError
from harmonia.infrastructure.repositories import (
    PatientProfileRepository,
    ProviderProfileRepository,
    UserRepository,
)

# Fields owned by the system rather than the profile's author.
_PROTECTED_FIELDS = frozenset(
    {"id", "user_id", "created_at", "updated_at", "rating", "review_count", "is_verified"}
)


def _editable_changes(entity_type: type, changes: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(entity_type)} - _PROTECTED_FIELDS
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Unsupported profile fields: {', '.join(sorted(unknown))}")
    return dict(changes)


def _mark_onboarded(session: Session, user: User, role: str) -> None:
    UserRepository(session).update(replace(user, is_onboarded=True, role=role))


def get_patient_profile(session: Session, user_id: str) -> PatientProfile:
    """Return the patient profile owned by ``user_id``."""

    profile = PatientProfileRepository(session).get_by_user_id(user_id)
    if profile is None:
        raise ResourceNotFoundError("Patient profile not found")
    return profile


def get_provider_profile(session: Session, user_id: str) -> ProviderProfile:
    """Return the provider profile owned by ``user_id``."""

    profile = ProviderProfileRepository(session).get_by_user_id(user_id)
    if profile is None:
        raise ResourceNotFoundError("Provider profile not found")
    return profile


def onboard_patient(
    session: Session, *, user: User, data: Mapping[str, Any]
) -> PatientProfile:
    """Create the caller's patient profile and flag the account as onboarded."""

    repository = PatientProfileRepository(session)
    if repository.get_by_user_id(user.id) is not None:
        raise ValueError("Patient profile already exists")

    profile = PatientProfile(
        id=None, user_id=user.id, **_editable_changes(PatientProfile, data)
    )
    created = repository.create(profile)
    _mark_onboarded(session, user, ROLE_PATIENT)
    return created


def update_patient_profile(
    session: Session, *, user_id: str, changes: Mapping[str, Any]
) -> PatientProfile:
    current = get_patient_profile(session, user_id)
    updated = replace(current, **_editable_changes(PatientProfile, changes))
    return PatientProfileRepository(session).update(updated)


def onboard_provider(
    session: Session, *, user: User, data: Mapping[str, Any]
) -> ProviderProfile:
    """Create the caller's provider profile and flag the account as onboarded."""

    repository = ProviderProfileRepository(session)
    if repository.get_by_user_id(user.id) is not None:
        raise ValueError("Provider profile already exists")

    profile = ProviderProfile(
        id=None, user_id=user.id, **_editable_changes(ProviderProfile, data)
    )
    created = repository.create(profile)
    _mark_onboarded(session, user, ROLE_PROVIDER)
    return created


def update_provider_profile(
    session: Session, *, user_id: str, changes: Mapping[str, Any]
) -> ProviderProfile:
    current = get_provider_profile(session, user_id)
    updated = replace(current, **_editable_changes(ProviderProfile, changes))
    return ProviderProfileRepository(session).update(updated)


__all__ = [
    "get_patient_profile",
    "get_provider_profile",
    "onboard_patient",
    "onboard_provider",
    "update_patient_profile",
    "update_provider_profile",
]
