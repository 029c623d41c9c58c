"""Domain entities exposed by the application."""

from .appointment import (
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_CONFIRMED,
    APPOINTMENT_STATUS_SCHEDULED,
    APPOINTMENT_STATUSES,
    Appointment,
)
from .health_journal_entry import HealthJournalEntry
from .listings import (
    AppointmentDetail,
    MedicalRecordDetail,
    MessageWithParticipants,
    MonthlyCount,
    ProviderAnalytics,
    ProviderListing,
    ReviewDetail,
    UserStats,
    UserWithProfiles,
)
from .medical_record import RECORD_TYPES, MedicalRecord
from .message import (
    MESSAGE_STATUS_DELIVERED,
    MESSAGE_STATUS_READ,
    MESSAGE_STATUS_SENT,
    Message,
)
from .patient_profile import PatientProfile
from .provider_profile import SUBSCRIPTION_TIER_BASIC, ProviderProfile
from .provider_review import ProviderReview
from .user import ROLE_ADMIN, ROLE_PATIENT, ROLE_PROVIDER, USER_ROLES, User

__all__ = [
    "Appointment",
    "APPOINTMENT_STATUS_SCHEDULED",
    "APPOINTMENT_STATUS_CONFIRMED",
    "APPOINTMENT_STATUS_COMPLETED",
    "APPOINTMENT_STATUS_CANCELLED",
    "APPOINTMENT_STATUSES",
    "AppointmentDetail",
    "HealthJournalEntry",
    "MedicalRecord",
    "MedicalRecordDetail",
    "Message",
    "MESSAGE_STATUS_SENT",
    "MESSAGE_STATUS_DELIVERED",
    "MESSAGE_STATUS_READ",
    "MessageWithParticipants",
    "MonthlyCount",
    "PatientProfile",
    "ProviderAnalytics",
    "ProviderListing",
    "ProviderProfile",
    "ProviderReview",
    "RECORD_TYPES",
    "ReviewDetail",
    "ROLE_ADMIN",
    "ROLE_PATIENT",
    "ROLE_PROVIDER",
    "SUBSCRIPTION_TIER_BASIC",
    "USER_ROLES",
    "User",
    "UserStats",
    "UserWithProfiles",
]
