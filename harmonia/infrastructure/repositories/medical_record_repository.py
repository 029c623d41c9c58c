"""Persistence helpers for medical records."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from harmonia.domain.entities import MedicalRecord, MedicalRecordDetail
from harmonia.infrastructure.models import MedicalRecordModel
from harmonia.utils import ensure_app_naive_datetime, ensure_app_timezone

from .provider_profile_repository import ProviderProfileRepository
from .user_repository import UserRepository


class MedicalRecordRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, record: MedicalRecord) -> MedicalRecord:
        model = MedicalRecordModel(
            patient_id=record.patient_id,
            provider_id=record.provider_id,
            title=record.title,
            description=record.description,
            record_type=record.record_type,
            file_url=record.file_url,
            file_name=record.file_name,
            file_size=record.file_size,
            record_date=ensure_app_naive_datetime(record.record_date),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_patient(
        self, patient_id: str, *, provider_id: str | None = None
    ) -> Sequence[MedicalRecordDetail]:
        """Return the patient's records, optionally only those filed by ``provider_id``."""

        query = self.session.query(MedicalRecordModel).filter(
            MedicalRecordModel.patient_id == patient_id
        )
        if provider_id is not None:
            query = query.filter(MedicalRecordModel.provider_id == provider_id)
        query = query.order_by(MedicalRecordModel.record_date.desc())
        return [self._to_detail(model) for model in query.all()]

    def list_by_file_url(self, file_url: str) -> Sequence[MedicalRecord]:
        query = self.session.query(MedicalRecordModel).filter(
            MedicalRecordModel.file_url == file_url
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: MedicalRecordModel) -> MedicalRecord:
        return MedicalRecord(
            id=model.id,
            patient_id=model.patient_id,
            provider_id=model.provider_id,
            title=model.title,
            description=model.description,
            record_type=model.record_type,
            file_url=model.file_url,
            file_name=model.file_name,
            file_size=model.file_size,
            record_date=ensure_app_timezone(model.record_date),
            created_at=ensure_app_timezone(model.created_at),
        )

    @classmethod
    def _to_detail(cls, model: MedicalRecordModel) -> MedicalRecordDetail:
        provider = model.provider
        if provider is None:
            return MedicalRecordDetail(record=cls._to_entity(model))
        return MedicalRecordDetail(
            record=cls._to_entity(model),
            provider=ProviderProfileRepository.to_entity(provider),
            provider_user=UserRepository.to_entity(provider.user),
        )


__all__ = ["MedicalRecordRepository"]
