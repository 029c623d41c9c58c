"""Provider dashboard and admin statistics schemas."""

from decimal import Decimal

from .auth import UserRead
from .base import APIModel


class MonthlyCountRead(APIModel):
    month: str
    count: int


class ProviderAnalyticsRead(APIModel):
    total_patients: int
    total_appointments: int
    avg_rating: Decimal
    review_count: int
    monthly_appointments: list[MonthlyCountRead]


class AdminUserRead(UserRead):
    has_patient_profile: bool
    has_provider_profile: bool


class UserStatsRead(APIModel):
    total_users: int
    total_patients: int
    total_providers: int
    total_appointments: int
