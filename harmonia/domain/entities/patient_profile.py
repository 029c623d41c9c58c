"""Domain entity representing the clinical and cultural profile of a patient."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PatientProfile:
    """Onboarding information a patient shares with providers."""

    id: str | None
    user_id: str
    date_of_birth: datetime | None = None
    gender: str | None = None
    cultural_background: str | None = None
    primary_language: str | None = None
    secondary_languages: list[str] = field(default_factory=list)
    emergency_contact_name: str | None = None
    emergency_contact_phone: str | None = None
    medical_conditions: list[str] = field(default_factory=list)
    medications: list[str] = field(default_factory=list)
    allergies: list[str] = field(default_factory=list)
    cultural_practices: str | None = None
    dietary_restrictions: str | None = None
    insurance_provider: str | None = None
    insurance_policy_number: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["PatientProfile"]
