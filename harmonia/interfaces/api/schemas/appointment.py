"""Appointment schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from .auth import UserSummaryRead
from .base import APIModel


class AppointmentCreate(APIModel):
    provider_id: str
    appointment_date: datetime
    type: str = Field(..., min_length=1)
    duration: int = Field(default=30, gt=0)
    is_virtual: bool = False
    meeting_link: str | None = None
    notes: str | None = None


class AppointmentUpdate(APIModel):
    model_config = ConfigDict(extra="forbid")

    appointment_date: datetime | None = None
    duration: int | None = Field(default=None, gt=0)
    type: str | None = None
    status: str | None = None
    is_virtual: bool | None = None
    meeting_link: str | None = None
    notes: str | None = None


class AppointmentRead(APIModel):
    id: str
    patient_id: str
    provider_id: str
    appointment_date: datetime
    duration: int
    type: str
    status: str
    is_virtual: bool
    meeting_link: str | None
    notes: str | None
    created_at: datetime | None
    updated_at: datetime | None


class AppointmentParticipantRead(APIModel):
    id: str
    user: UserSummaryRead


class AppointmentProviderRead(AppointmentParticipantRead):
    specialty: str


class AppointmentDetailRead(AppointmentRead):
    patient: AppointmentParticipantRead
    provider: AppointmentProviderRead
