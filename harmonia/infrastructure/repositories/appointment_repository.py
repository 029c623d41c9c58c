"""Persistence helpers for appointments."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from harmonia.domain.entities import Appointment, AppointmentDetail
from harmonia.infrastructure.models import AppointmentModel
from harmonia.utils import ensure_app_naive_datetime, ensure_app_timezone

from .patient_profile_repository import PatientProfileRepository
from .provider_profile_repository import ProviderProfileRepository
from .user_repository import UserRepository


class AppointmentRepository:
    """Provide CRUD operations for :class:`Appointment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, appointment_id: str) -> Appointment | None:
        model = self.session.get(AppointmentModel, appointment_id)
        return self._to_entity(model) if model else None

    def get_detail(self, appointment_id: str) -> AppointmentDetail | None:
        model = self.session.get(AppointmentModel, appointment_id)
        return self._to_detail(model) if model else None

    def create(self, appointment: Appointment) -> Appointment:
        model = AppointmentModel()
        self._apply_entity_to_model(model, appointment)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, appointment: Appointment) -> Appointment:
        if appointment.id is None:
            raise ValueError("Appointment id is required for updates")
        model = self.session.get(AppointmentModel, appointment.id)
        if model is None:
            msg = f"Appointment with id {appointment.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, appointment)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_patient(self, patient_id: str) -> Sequence[AppointmentDetail]:
        query = (
            self.session.query(AppointmentModel)
            .filter(AppointmentModel.patient_id == patient_id)
            .order_by(AppointmentModel.appointment_date.asc())
        )
        return [self._to_detail(model) for model in query.all()]

    def list_for_provider(self, provider_id: str) -> Sequence[AppointmentDetail]:
        query = (
            self.session.query(AppointmentModel)
            .filter(AppointmentModel.provider_id == provider_id)
            .order_by(AppointmentModel.appointment_date.asc())
        )
        return [self._to_detail(model) for model in query.all()]

    def count(self) -> int:
        return self.session.query(func.count(AppointmentModel.id)).scalar() or 0

    def count_for_provider(self, provider_id: str) -> int:
        return (
            self.session.query(func.count(AppointmentModel.id))
            .filter(AppointmentModel.provider_id == provider_id)
            .scalar()
            or 0
        )

    def count_distinct_patients(self, provider_id: str) -> int:
        return (
            self.session.query(func.count(func.distinct(AppointmentModel.patient_id)))
            .filter(AppointmentModel.provider_id == provider_id)
            .scalar()
            or 0
        )

    def list_dates_for_provider(
        self, provider_id: str, *, since: datetime
    ) -> list[datetime]:
        query = (
            self.session.query(AppointmentModel.appointment_date)
            .filter(AppointmentModel.provider_id == provider_id)
            .filter(AppointmentModel.appointment_date >= ensure_app_naive_datetime(since))
            .order_by(AppointmentModel.appointment_date.asc())
        )
        return [ensure_app_timezone(value) for (value,) in query.all()]

    @staticmethod
    def _apply_entity_to_model(model: AppointmentModel, appointment: Appointment) -> None:
        model.patient_id = appointment.patient_id
        model.provider_id = appointment.provider_id
        model.appointment_date = ensure_app_naive_datetime(appointment.appointment_date)
        model.duration = appointment.duration
        model.type = appointment.type
        model.status = appointment.status
        model.is_virtual = appointment.is_virtual
        model.meeting_link = appointment.meeting_link
        model.notes = appointment.notes

    @staticmethod
    def _to_entity(model: AppointmentModel) -> Appointment:
        return Appointment(
            id=model.id,
            patient_id=model.patient_id,
            provider_id=model.provider_id,
            appointment_date=ensure_app_timezone(model.appointment_date),
            type=model.type,
            duration=model.duration,
            status=model.status,
            is_virtual=bool(model.is_virtual),
            meeting_link=model.meeting_link,
            notes=model.notes,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @classmethod
    def _to_detail(cls, model: AppointmentModel) -> AppointmentDetail:
        return AppointmentDetail(
            appointment=cls._to_entity(model),
            patient=PatientProfileRepository.to_entity(model.patient),
            patient_user=UserRepository.to_entity(model.patient.user),
            provider=ProviderProfileRepository.to_entity(model.provider),
            provider_user=UserRepository.to_entity(model.provider.user),
        )


__all__ = ["AppointmentRepository"]
