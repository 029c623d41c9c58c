"""Patient and provider profile schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import ConfigDict, Field

from .auth import UserSummaryRead
from .base import APIModel


class PatientProfileFields(APIModel):
    date_of_birth: datetime | None = None
    gender: str | None = None
    cultural_background: str | None = None
    primary_language: str | None = None
    secondary_languages: list[str] = Field(default_factory=list)
    emergency_contact_name: str | None = None
    emergency_contact_phone: str | None = None
    medical_conditions: list[str] = Field(default_factory=list)
    medications: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    cultural_practices: str | None = None
    dietary_restrictions: str | None = None
    insurance_provider: str | None = None
    insurance_policy_number: str | None = None


class PatientProfileCreate(PatientProfileFields):
    model_config = ConfigDict(extra="forbid")


class PatientProfileUpdate(PatientProfileFields):
    """Partial update; only the keys present in the request are applied."""

    model_config = ConfigDict(extra="forbid")


class PatientProfileRead(PatientProfileFields):
    id: str
    user_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProviderProfileFields(APIModel):
    cultural_backgrounds: list[str] = Field(default_factory=list)
    languages_spoken: list[str] = Field(default_factory=list)
    license_number: str | None = None
    years_of_experience: int | None = Field(default=None, ge=0)
    education: str | None = None
    certifications: list[str] = Field(default_factory=list)
    bio: str | None = None
    cultural_competency_statement: str | None = None
    telehealth: bool = False
    in_person: bool = False
    accepts_insurance: bool = False
    location: str | None = None


class ProviderProfileCreate(ProviderProfileFields):
    model_config = ConfigDict(extra="forbid")

    specialty: str = Field(..., min_length=1)


class ProviderProfileUpdate(ProviderProfileFields):
    model_config = ConfigDict(extra="forbid")

    specialty: str | None = Field(default=None, min_length=1)


class ProviderProfileRead(ProviderProfileFields):
    id: str
    user_id: str
    specialty: str
    rating: Decimal
    review_count: int
    subscription_tier: str
    is_verified: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProviderListingRead(ProviderProfileRead):
    user: UserSummaryRead
