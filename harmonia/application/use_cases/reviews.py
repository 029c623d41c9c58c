"""Use cases for provider reviews."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from harmonia.domain.entities import ProviderReview, ReviewDetail
from harmonia.domain.errors import ResourceNotFoundError
from harmonia.infrastructure.repositories import (
    ProviderProfileRepository,
    ProviderReviewRepository,
)

from .profiles import get_patient_profile

RATING_RANGE = range(1, 6)


def create_review(
    session: Session,
    *,
    user_id: str,
    provider_id: str,
    rating: int,
    cultural_competency_rating: int,
    appointment_id: str | None = None,
    comment: str | None = None,
    is_anonymous: bool = False,
) -> ProviderReview:
    """Record a patient's review and refresh the provider's rating summary."""

    for label, value in (
        ("Rating", rating),
        ("Cultural competency rating", cultural_competency_rating),
    ):
        if value not in RATING_RANGE:
            raise ValueError(f"{label} must be between 1 and 5")

    patient = get_patient_profile(session, user_id)
    providers = ProviderProfileRepository(session)
    if providers.get(provider_id) is None:
        raise ResourceNotFoundError("Provider not found")

    reviews = ProviderReviewRepository(session)
    created = reviews.create(
        ProviderReview(
            id=None,
            patient_id=patient.id,
            provider_id=provider_id,
            appointment_id=appointment_id,
            rating=rating,
            cultural_competency_rating=cultural_competency_rating,
            comment=comment,
            is_anonymous=is_anonymous,
        )
    )
    average, count = reviews.rating_summary(provider_id)
    providers.update_rating(provider_id, average=average, count=count)
    return created


def list_reviews(session: Session, *, provider_id: str) -> Sequence[ReviewDetail]:
    return ProviderReviewRepository(session).list_for_provider(provider_id)


__all__ = ["create_review", "list_reviews"]
