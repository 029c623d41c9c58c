"""Use cases for booking and managing appointments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any, Mapping

from sqlalchemy.orm import Session

from harmonia.domain.entities import (
    APPOINTMENT_STATUSES,
    ROLE_PROVIDER,
    Appointment,
    AppointmentDetail,
    User,
)
from harmonia.domain.errors import AccessDeniedError, ResourceNotFoundError
from harmonia.infrastructure.repositories import (
    AppointmentRepository,
    PatientProfileRepository,
    ProviderProfileRepository,
)

from .profiles import get_patient_profile, get_provider_profile

_UPDATABLE_FIELDS = frozenset(
    {"appointment_date", "duration", "type", "status", "is_virtual", "meeting_link", "notes"}
)


def _validate_status(status: str) -> None:
    if status not in APPOINTMENT_STATUSES:
        raise ValueError(f"Invalid appointment status: {status}")


def create_appointment(
    session: Session,
    *,
    user: User,
    provider_id: str,
    appointment_date: datetime,
    type: str,
    duration: int = 30,
    is_virtual: bool = False,
    meeting_link: str | None = None,
    notes: str | None = None,
) -> Appointment:
    """Book an appointment between the calling patient and ``provider_id``."""

    patient = get_patient_profile(session, user.id)
    if ProviderProfileRepository(session).get(provider_id) is None:
        raise ResourceNotFoundError("Provider not found")
    if duration <= 0:
        raise ValueError("Duration must be a positive number of minutes")

    appointment = Appointment(
        id=None,
        patient_id=patient.id,
        provider_id=provider_id,
        appointment_date=appointment_date,
        type=type,
        duration=duration,
        is_virtual=is_virtual,
        meeting_link=meeting_link,
        notes=notes,
    )
    return AppointmentRepository(session).create(appointment)


def list_appointments(session: Session, *, user: User) -> Sequence[AppointmentDetail]:
    """Return the appointments the caller takes part in, by role."""

    repository = AppointmentRepository(session)
    if user.has_role(ROLE_PROVIDER):
        provider = get_provider_profile(session, user.id)
        return repository.list_for_provider(provider.id)

    patient = PatientProfileRepository(session).get_by_user_id(user.id)
    if patient is None:
        return []
    return repository.list_for_patient(patient.id)


def _is_participant(session: Session, appointment: Appointment, user: User) -> bool:
    patient = PatientProfileRepository(session).get_by_user_id(user.id)
    if patient is not None and patient.id == appointment.patient_id:
        return True
    provider = ProviderProfileRepository(session).get_by_user_id(user.id)
    return provider is not None and provider.id == appointment.provider_id


def update_appointment(
    session: Session,
    *,
    appointment_id: str,
    user: User,
    changes: Mapping[str, Any],
) -> Appointment:
    repository = AppointmentRepository(session)
    appointment = repository.get(appointment_id)
    if appointment is None:
        raise ResourceNotFoundError("Appointment not found")
    if not _is_participant(session, appointment, user):
        raise AccessDeniedError("Not allowed to modify this appointment")

    unknown = set(changes) - _UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Unsupported appointment fields: {', '.join(sorted(unknown))}")
    if "status" in changes:
        _validate_status(changes["status"])

    return repository.update(replace(appointment, **changes))


__all__ = ["create_appointment", "list_appointments", "update_appointment"]
