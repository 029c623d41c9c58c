"""Domain entity representing a care provider's public profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

SUBSCRIPTION_TIER_BASIC = "basic"


@dataclass
class ProviderProfile:
    """Professional and cultural-competency details of a provider."""

    id: str | None
    user_id: str
    specialty: str
    cultural_backgrounds: list[str] = field(default_factory=list)
    languages_spoken: list[str] = field(default_factory=list)
    license_number: str | None = None
    years_of_experience: int | None = None
    education: str | None = None
    certifications: list[str] = field(default_factory=list)
    bio: str | None = None
    cultural_competency_statement: str | None = None
    telehealth: bool = False
    in_person: bool = False
    accepts_insurance: bool = False
    location: str | None = None
    rating: Decimal = Decimal("0.00")
    review_count: int = 0
    subscription_tier: str = SUBSCRIPTION_TIER_BASIC
    is_verified: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["ProviderProfile", "SUBSCRIPTION_TIER_BASIC"]
