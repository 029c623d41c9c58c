"""Use cases for filing and retrieving medical records."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from harmonia.domain.entities import (
    RECORD_TYPES,
    ROLE_PROVIDER,
    MedicalRecord,
    MedicalRecordDetail,
    User,
)
from harmonia.domain.errors import ResourceNotFoundError
from harmonia.infrastructure.repositories import (
    MedicalRecordRepository,
    PatientProfileRepository,
    ProviderProfileRepository,
)

from .profiles import get_patient_profile, get_provider_profile


def create_medical_record(
    session: Session,
    *,
    user: User,
    title: str,
    record_type: str,
    record_date: datetime,
    patient_id: str | None = None,
    description: str | None = None,
    file_url: str | None = None,
    file_name: str | None = None,
    file_size: int | None = None,
) -> MedicalRecord:
    """File a medical record.

    Patients always file against their own profile. Providers must name the
    patient and are recorded as the record's author.
    """

    if record_type not in RECORD_TYPES:
        raise ValueError(f"Invalid record type: {record_type}")

    provider_id: str | None = None
    if user.has_role(ROLE_PROVIDER):
        if not patient_id:
            raise ValueError("Patient ID is required")
        if PatientProfileRepository(session).get(patient_id) is None:
            raise ResourceNotFoundError("Patient not found")
        provider_id = get_provider_profile(session, user.id).id
    else:
        patient_id = get_patient_profile(session, user.id).id

    record = MedicalRecord(
        id=None,
        patient_id=patient_id,
        provider_id=provider_id,
        title=title,
        description=description,
        record_type=record_type,
        record_date=record_date,
        file_url=file_url,
        file_name=file_name,
        file_size=file_size,
    )
    return MedicalRecordRepository(session).create(record)


def list_medical_records(
    session: Session, *, user: User, patient_id: str | None = None
) -> Sequence[MedicalRecordDetail]:
    """Return the records the caller may read.

    Patients see everything filed against their own profile. Providers see
    only the records they filed for ``patient_id``.
    """

    repository = MedicalRecordRepository(session)
    if user.has_role(ROLE_PROVIDER):
        if not patient_id:
            raise ValueError("Patient ID is required")
        provider = get_provider_profile(session, user.id)
        return repository.list_for_patient(patient_id, provider_id=provider.id)

    patient = PatientProfileRepository(session).get_by_user_id(user.id)
    if patient is None:
        return []
    return repository.list_for_patient(patient.id)


def find_accessible_record(session: Session, *, user: User, file_url: str) -> MedicalRecord:
    """Return a record referencing ``file_url`` that ``user`` may read.

    Readers are the record's patient, its filing provider and administrators.
    Anything else is reported as missing so object paths are not disclosed.
    """

    records = MedicalRecordRepository(session).list_by_file_url(file_url)
    if not records:
        raise ResourceNotFoundError("Object not found")
    if user.is_admin():
        return records[0]

    patient = PatientProfileRepository(session).get_by_user_id(user.id)
    provider = ProviderProfileRepository(session).get_by_user_id(user.id)
    for record in records:
        if patient is not None and record.patient_id == patient.id:
            return record
        if provider is not None and record.provider_id == provider.id:
            return record
    raise ResourceNotFoundError("Object not found")


__all__ = ["create_medical_record", "find_accessible_record", "list_medical_records"]
