"""Provider review schemas."""

from datetime import datetime

from pydantic import Field

from .base import APIModel


class ReviewCreate(APIModel):
    provider_id: str
    appointment_id: str | None = None
    rating: int = Field(..., ge=1, le=5)
    cultural_competency_rating: int = Field(..., ge=1, le=5)
    comment: str | None = None
    is_anonymous: bool = False


class ReviewRead(APIModel):
    id: str
    patient_id: str
    provider_id: str
    appointment_id: str | None
    rating: int
    cultural_competency_rating: int
    comment: str | None
    is_anonymous: bool
    created_at: datetime | None


class ReviewDetailRead(ReviewRead):
    reviewer_name: str | None = Field(
        default=None, description="Omitted when the review is anonymous"
    )
