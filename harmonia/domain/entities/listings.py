"""Composite read models returned by listing and detail use cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from .appointment import Appointment
from .medical_record import MedicalRecord
from .message import Message
from .patient_profile import PatientProfile
from .provider_profile import ProviderProfile
from .provider_review import ProviderReview
from .user import User


@dataclass
class ProviderListing:
    """Provider profile joined with its owning user."""

    profile: ProviderProfile
    user: User


@dataclass
class AppointmentDetail:
    """Appointment together with both participants."""

    appointment: Appointment
    patient: PatientProfile
    patient_user: User
    provider: ProviderProfile
    provider_user: User


@dataclass
class MessageWithParticipants:
    message: Message
    sender: User
    receiver: User


@dataclass
class MedicalRecordDetail:
    """Medical record with the filing provider when one is known."""

    record: MedicalRecord
    provider: ProviderProfile | None = None
    provider_user: User | None = None


@dataclass
class ReviewDetail:
    review: ProviderReview
    patient_user: User


@dataclass
class UserWithProfiles:
    """User row as seen by administrators."""

    user: User
    patient_profile: PatientProfile | None = None
    provider_profile: ProviderProfile | None = None


@dataclass
class MonthlyCount:
    month: str
    count: int


@dataclass
class ProviderAnalytics:
    """Aggregated figures shown on the provider dashboard."""

    total_patients: int = 0
    total_appointments: int = 0
    avg_rating: Decimal = Decimal("0.00")
    review_count: int = 0
    monthly_appointments: list[MonthlyCount] = field(default_factory=list)


@dataclass
class UserStats:
    total_users: int
    total_patients: int
    total_providers: int
    total_appointments: int


__all__ = [
    "AppointmentDetail",
    "MedicalRecordDetail",
    "MessageWithParticipants",
    "MonthlyCount",
    "ProviderAnalytics",
    "ProviderListing",
    "ReviewDetail",
    "UserStats",
    "UserWithProfiles",
]
