"""Persistence layer for user accounts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from harmonia.domain.entities import User, UserWithProfiles
from harmonia.infrastructure.models import UserModel
from harmonia.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide CRUD operations for :class:`User` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self.to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.lower())
            .first()
        )
        return self.to_entity(model) if model else None

    def get_map_by_ids(self, user_ids: Sequence[str]) -> dict[str, User]:
        if not user_ids:
            return {}
        query = self.session.query(UserModel).filter(UserModel.id.in_(set(user_ids)))
        return {model.id: self.to_entity(model) for model in query.all()}

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    def list_with_profiles(self) -> Sequence[UserWithProfiles]:
        # Imported lazily to avoid a cycle between the profile and user repositories.
        from .patient_profile_repository import PatientProfileRepository
        from .provider_profile_repository import ProviderProfileRepository

        query = (
            self.session.query(UserModel)
            .options(
                selectinload(UserModel.patient_profile),
                selectinload(UserModel.provider_profile),
            )
            .order_by(UserModel.created_at.desc())
        )
        results: list[UserWithProfiles] = []
        for model in query.all():
            results.append(
                UserWithProfiles(
                    user=self.to_entity(model),
                    patient_profile=PatientProfileRepository.to_entity(model.patient_profile)
                    if model.patient_profile
                    else None,
                    provider_profile=ProviderProfileRepository.to_entity(
                        model.provider_profile
                    )
                    if model.provider_profile
                    else None,
                )
            )
        return results

    def count(self) -> int:
        return self.session.query(func.count(UserModel.id)).scalar() or 0

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            if user.id is not None:
                model.id = user.id
            if user.created_at is not None:
                model.created_at = ensure_app_naive_datetime(user.created_at)
        model.email = user.email
        model.password_hash = user.password_hash
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.profile_image_url = user.profile_image_url
        model.role = user.role
        model.is_onboarded = user.is_onboarded

    @staticmethod
    def to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            profile_image_url=model.profile_image_url,
            role=model.role,
            is_onboarded=bool(model.is_onboarded),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["UserRepository"]
