"""ORM models used by the application infrastructure."""

from .user import UserModel
from .patient_profile import PatientProfileModel
from .provider_profile import ProviderProfileModel
from .health_journal_entry import HealthJournalEntryModel
from .appointment import AppointmentModel
from .message import MessageModel
from .medical_record import MedicalRecordModel
from .provider_review import ProviderReviewModel

__all__ = [
    "UserModel",
    "PatientProfileModel",
    "ProviderProfileModel",
    "HealthJournalEntryModel",
    "AppointmentModel",
    "MessageModel",
    "MedicalRecordModel",
    "ProviderReviewModel",
]
