from .analytics import (
    AdminUserRead,
    MonthlyCountRead,
    ProviderAnalyticsRead,
    UserStatsRead,
)
from .appointment import (
    AppointmentCreate,
    AppointmentDetailRead,
    AppointmentParticipantRead,
    AppointmentProviderRead,
    AppointmentRead,
    AppointmentUpdate,
)
from .auth import AuthResponse, LoginRequest, SignupRequest, UserRead, UserSummaryRead
from .base import APIModel, MessageResponse
from .health_journal import HealthJournalEntryCreate, HealthJournalEntryRead
from .medical_record import (
    MedicalRecordCreate,
    MedicalRecordDetailRead,
    MedicalRecordFileRequest,
    MedicalRecordFileResponse,
    MedicalRecordRead,
    RecordProviderRead,
    UploadUrlResponse,
)
from .message import MessageCreate, MessageDetailRead, MessageRead
from .profile import (
    PatientProfileCreate,
    PatientProfileRead,
    PatientProfileUpdate,
    ProviderListingRead,
    ProviderProfileCreate,
    ProviderProfileRead,
    ProviderProfileUpdate,
)
from .review import ReviewCreate, ReviewDetailRead, ReviewRead
