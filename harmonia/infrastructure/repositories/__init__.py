"""Repository implementations for infrastructure layer."""

from .user_repository import UserRepository
from .patient_profile_repository import PatientProfileRepository
from .provider_profile_repository import ProviderProfileRepository
from .health_journal_repository import HealthJournalRepository
from .appointment_repository import AppointmentRepository
from .message_repository import MessageRepository
from .medical_record_repository import MedicalRecordRepository
from .provider_review_repository import ProviderReviewRepository

__all__ = [
    "UserRepository",
    "PatientProfileRepository",
    "ProviderProfileRepository",
    "HealthJournalRepository",
    "AppointmentRepository",
    "MessageRepository",
    "MedicalRecordRepository",
    "ProviderReviewRepository",
]
