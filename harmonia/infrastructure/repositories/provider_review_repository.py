"""Persistence helpers for provider reviews."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from harmonia.domain.entities import ProviderReview, ReviewDetail
from harmonia.infrastructure.models import ProviderReviewModel
from harmonia.utils import ensure_app_timezone

from .user_repository import UserRepository


class ProviderReviewRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, review: ProviderReview) -> ProviderReview:
        model = ProviderReviewModel(
            patient_id=review.patient_id,
            provider_id=review.provider_id,
            appointment_id=review.appointment_id,
            rating=review.rating,
            cultural_competency_rating=review.cultural_competency_rating,
            comment=review.comment,
            is_anonymous=review.is_anonymous,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_provider(self, provider_id: str) -> Sequence[ReviewDetail]:
        query = (
            self.session.query(ProviderReviewModel)
            .filter(ProviderReviewModel.provider_id == provider_id)
            .order_by(ProviderReviewModel.created_at.desc())
        )
        return [
            ReviewDetail(
                review=self._to_entity(model),
                patient_user=UserRepository.to_entity(model.patient.user),
            )
            for model in query.all()
        ]

    def rating_summary(self, provider_id: str) -> tuple[Decimal, int]:
        """Return the average rating and number of reviews for ``provider_id``."""

        average, count = (
            self.session.query(
                func.avg(ProviderReviewModel.rating),
                func.count(ProviderReviewModel.id),
            )
            .filter(ProviderReviewModel.provider_id == provider_id)
            .one()
        )
        return Decimal(str(average or 0)), int(count or 0)

    @staticmethod
    def _to_entity(model: ProviderReviewModel) -> ProviderReview:
        return ProviderReview(
            id=model.id,
            patient_id=model.patient_id,
            provider_id=model.provider_id,
            appointment_id=model.appointment_id,
            rating=model.rating,
            cultural_competency_rating=model.cultural_competency_rating,
            comment=model.comment,
            is_anonymous=bool(model.is_anonymous),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProviderReviewRepository"]
