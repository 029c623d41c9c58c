"""Domain entity representing a patient's review of a provider."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ProviderReview:
    id: str | None
    patient_id: str
    provider_id: str
    rating: int
    cultural_competency_rating: int
    appointment_id: str | None = None
    comment: str | None = None
    is_anonymous: bool = False
    created_at: datetime | None = None


__all__ = ["ProviderReview"]
