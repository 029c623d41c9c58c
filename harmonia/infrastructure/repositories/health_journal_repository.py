"""Persistence helpers for health journal entries."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from harmonia.domain.entities import HealthJournalEntry
from harmonia.infrastructure.models import HealthJournalEntryModel
from harmonia.utils import ensure_app_naive_datetime, ensure_app_timezone


class HealthJournalRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: HealthJournalEntry) -> HealthJournalEntry:
        model = HealthJournalEntryModel(
            patient_id=entry.patient_id,
            entry_date=ensure_app_naive_datetime(entry.entry_date),
            blood_pressure_systolic=entry.blood_pressure_systolic,
            blood_pressure_diastolic=entry.blood_pressure_diastolic,
            blood_glucose=entry.blood_glucose,
            weight=entry.weight,
            weight_unit=entry.weight_unit,
            mood=entry.mood,
            sleep_hours=entry.sleep_hours,
            sleep_quality=entry.sleep_quality,
            physical_activity=entry.physical_activity,
            traditional_practices=entry.traditional_practices,
            community_connection=entry.community_connection,
            notes=entry.notes,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_patient(
        self, patient_id: str, *, limit: int | None = 30
    ) -> Sequence[HealthJournalEntry]:
        query = (
            self.session.query(HealthJournalEntryModel)
            .filter(HealthJournalEntryModel.patient_id == patient_id)
            .order_by(
                HealthJournalEntryModel.entry_date.desc(),
                HealthJournalEntryModel.created_at.desc(),
            )
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: HealthJournalEntryModel) -> HealthJournalEntry:
        return HealthJournalEntry(
            id=model.id,
            patient_id=model.patient_id,
            entry_date=ensure_app_timezone(model.entry_date),
            blood_pressure_systolic=model.blood_pressure_systolic,
            blood_pressure_diastolic=model.blood_pressure_diastolic,
            blood_glucose=model.blood_glucose,
            weight=model.weight,
            weight_unit=model.weight_unit,
            mood=model.mood,
            sleep_hours=model.sleep_hours,
            sleep_quality=model.sleep_quality,
            physical_activity=model.physical_activity,
            traditional_practices=model.traditional_practices,
            community_connection=model.community_connection,
            notes=model.notes,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["HealthJournalRepository"]
