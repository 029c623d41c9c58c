"""Persistence helpers for provider profiles and provider search."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from harmonia.domain.entities import ProviderListing, ProviderProfile
from harmonia.infrastructure.models import ProviderProfileModel
from harmonia.utils import ensure_app_timezone

from .user_repository import UserRepository

SEARCH_LIMIT = 50


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _contains_casefold(values: Sequence[str] | None, needle: str) -> bool:
    target = needle.casefold()
    return any(str(value).casefold() == target for value in values or [])


class ProviderProfileRepository:
    """Provide CRUD and search operations for :class:`ProviderProfile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, profile_id: str) -> ProviderProfile | None:
        model = self.session.get(ProviderProfileModel, profile_id)
        return self.to_entity(model) if model else None

    def get_listing(self, profile_id: str) -> ProviderListing | None:
        model = self.session.get(ProviderProfileModel, profile_id)
        if model is None:
            return None
        return ProviderListing(
            profile=self.to_entity(model), user=UserRepository.to_entity(model.user)
        )

    def get_by_user_id(self, user_id: str) -> ProviderProfile | None:
        model = self._get_model_by_user(user_id)
        return self.to_entity(model) if model else None

    def create(self, profile: ProviderProfile) -> ProviderProfile:
        model = ProviderProfileModel(user_id=profile.user_id)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    def update(self, profile: ProviderProfile) -> ProviderProfile:
        model = self._get_model_by_user(profile.user_id)
        if model is None:
            msg = f"Provider profile for user {profile.user_id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    def search(
        self,
        *,
        specialty: str | None = None,
        cultural_background: str | None = None,
        language: str | None = None,
        location: str | None = None,
        limit: int = SEARCH_LIMIT,
    ) -> Sequence[ProviderListing]:
        """Return verified providers matching every supplied filter.

        Text filters are case-insensitive substring matches evaluated by the
        database; list filters require an exact (case-insensitive) member and are
        evaluated in Python so the query stays portable across backends.
        """

        query = self.session.query(ProviderProfileModel).filter(
            ProviderProfileModel.is_verified.is_(True)
        )
        if specialty:
            query = query.filter(
                ProviderProfileModel.specialty.ilike(
                    f"%{_escape_like(specialty)}%", escape="\\"
                )
            )
        if location:
            query = query.filter(
                ProviderProfileModel.location.ilike(
                    f"%{_escape_like(location)}%", escape="\\"
                )
            )
        query = query.order_by(
            ProviderProfileModel.rating.desc(),
            ProviderProfileModel.review_count.desc(),
            ProviderProfileModel.created_at.asc(),
        )

        results: list[ProviderListing] = []
        for model in query.all():
            if cultural_background and not _contains_casefold(
                model.cultural_backgrounds, cultural_background
            ):
                continue
            if language and not _contains_casefold(model.languages_spoken, language):
                continue
            results.append(
                ProviderListing(
                    profile=self.to_entity(model),
                    user=UserRepository.to_entity(model.user),
                )
            )
            if len(results) >= limit:
                break
        return results

    def update_rating(self, profile_id: str, *, average: Decimal, count: int) -> None:
        model = self.session.get(ProviderProfileModel, profile_id)
        if model is None:
            msg = f"Provider profile with id {profile_id} not found"
            raise ValueError(msg)
        model.rating = average.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        model.review_count = count
        self.session.add(model)
        self.session.commit()

    def count(self) -> int:
        return self.session.query(func.count(ProviderProfileModel.id)).scalar() or 0

    def _get_model_by_user(self, user_id: str) -> ProviderProfileModel | None:
        return (
            self.session.query(ProviderProfileModel)
            .filter(ProviderProfileModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(
        model: ProviderProfileModel, profile: ProviderProfile
    ) -> None:
        model.specialty = profile.specialty
        model.cultural_backgrounds = list(profile.cultural_backgrounds)
        model.languages_spoken = list(profile.languages_spoken)
        model.license_number = profile.license_number
        model.years_of_experience = profile.years_of_experience
        model.education = profile.education
        model.certifications = list(profile.certifications)
        model.bio = profile.bio
        model.cultural_competency_statement = profile.cultural_competency_statement
        model.telehealth = profile.telehealth
        model.in_person = profile.in_person
        model.accepts_insurance = profile.accepts_insurance
        model.location = profile.location
        model.rating = profile.rating
        model.review_count = profile.review_count
        model.subscription_tier = profile.subscription_tier
        model.is_verified = profile.is_verified

    @staticmethod
    def to_entity(model: ProviderProfileModel) -> ProviderProfile:
        return ProviderProfile(
            id=model.id,
            user_id=model.user_id,
            specialty=model.specialty,
            cultural_backgrounds=list(model.cultural_backgrounds or []),
            languages_spoken=list(model.languages_spoken or []),
            license_number=model.license_number,
            years_of_experience=model.years_of_experience,
            education=model.education,
            certifications=list(model.certifications or []),
            bio=model.bio,
            cultural_competency_statement=model.cultural_competency_statement,
            telehealth=bool(model.telehealth),
            in_person=bool(model.in_person),
            accepts_insurance=bool(model.accepts_insurance),
            location=model.location,
            rating=Decimal(str(model.rating or 0)).quantize(Decimal("0.01")),
            review_count=model.review_count or 0,
            subscription_tier=model.subscription_tier,
            is_verified=bool(model.is_verified),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ProviderProfileRepository", "SEARCH_LIMIT"]
