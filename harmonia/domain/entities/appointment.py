"""Domain entity representing a scheduled visit between patient and provider."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

APPOINTMENT_STATUS_SCHEDULED = "scheduled"
APPOINTMENT_STATUS_CONFIRMED = "confirmed"
APPOINTMENT_STATUS_COMPLETED = "completed"
APPOINTMENT_STATUS_CANCELLED = "cancelled"
APPOINTMENT_STATUSES = (
    APPOINTMENT_STATUS_SCHEDULED,
    APPOINTMENT_STATUS_CONFIRMED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_CANCELLED,
)


@dataclass
class Appointment:
    """Booking of a provider's time by a patient."""

    id: str | None
    patient_id: str
    provider_id: str
    appointment_date: datetime
    type: str
    duration: int = 30
    status: str = APPOINTMENT_STATUS_SCHEDULED
    is_virtual: bool = False
    meeting_link: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Appointment",
    "APPOINTMENT_STATUS_SCHEDULED",
    "APPOINTMENT_STATUS_CONFIRMED",
    "APPOINTMENT_STATUS_COMPLETED",
    "APPOINTMENT_STATUS_CANCELLED",
    "APPOINTMENT_STATUSES",
]
