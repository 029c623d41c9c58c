"""Persistence helpers for patient profiles."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from harmonia.domain.entities import PatientProfile
from harmonia.infrastructure.models import PatientProfileModel
from harmonia.utils import ensure_app_naive_datetime, ensure_app_timezone


class PatientProfileRepository:
    """Provide CRUD operations for :class:`PatientProfile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, profile_id: str) -> PatientProfile | None:
        model = self.session.get(PatientProfileModel, profile_id)
        return self.to_entity(model) if model else None

    def get_by_user_id(self, user_id: str) -> PatientProfile | None:
        model = self._get_model_by_user(user_id)
        return self.to_entity(model) if model else None

    def create(self, profile: PatientProfile) -> PatientProfile:
        model = PatientProfileModel(user_id=profile.user_id)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    def update(self, profile: PatientProfile) -> PatientProfile:
        model = self._get_model_by_user(profile.user_id)
        if model is None:
            msg = f"Patient profile for user {profile.user_id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    def count(self) -> int:
        return self.session.query(func.count(PatientProfileModel.id)).scalar() or 0

    def _get_model_by_user(self, user_id: str) -> PatientProfileModel | None:
        return (
            self.session.query(PatientProfileModel)
            .filter(PatientProfileModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(
        model: PatientProfileModel, profile: PatientProfile
    ) -> None:
        model.date_of_birth = ensure_app_naive_datetime(profile.date_of_birth)
        model.gender = profile.gender
        model.cultural_background = profile.cultural_background
        model.primary_language = profile.primary_language
        model.secondary_languages = list(profile.secondary_languages)
        model.emergency_contact_name = profile.emergency_contact_name
        model.emergency_contact_phone = profile.emergency_contact_phone
        model.medical_conditions = list(profile.medical_conditions)
        model.medications = list(profile.medications)
        model.allergies = list(profile.allergies)
        model.cultural_practices = profile.cultural_practices
        model.dietary_restrictions = profile.dietary_restrictions
        model.insurance_provider = profile.insurance_provider
        model.insurance_policy_number = profile.insurance_policy_number

    @staticmethod
    def to_entity(model: PatientProfileModel) -> PatientProfile:
        return PatientProfile(
            id=model.id,
            user_id=model.user_id,
            date_of_birth=ensure_app_timezone(model.date_of_birth),
            gender=model.gender,
            cultural_background=model.cultural_background,
            primary_language=model.primary_language,
            secondary_languages=list(model.secondary_languages or []),
            emergency_contact_name=model.emergency_contact_name,
            emergency_contact_phone=model.emergency_contact_phone,
            medical_conditions=list(model.medical_conditions or []),
            medications=list(model.medications or []),
            allergies=list(model.allergies or []),
            cultural_practices=model.cultural_practices,
            dietary_restrictions=model.dietary_restrictions,
            insurance_provider=model.insurance_provider,
            insurance_policy_number=model.insurance_policy_number,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["PatientProfileRepository"]
