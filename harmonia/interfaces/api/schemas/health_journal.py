"""Health journal schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from .base import APIModel


class HealthJournalEntryCreate(APIModel):
    entry_date: datetime
    blood_pressure_systolic: int | None = Field(default=None, gt=0)
    blood_pressure_diastolic: int | None = Field(default=None, gt=0)
    blood_glucose: int | None = Field(default=None, gt=0)
    weight: Decimal | None = Field(default=None, gt=0)
    weight_unit: str = "lbs"
    mood: str | None = None
    sleep_hours: Decimal | None = Field(default=None, ge=0, le=24)
    sleep_quality: str | None = None
    physical_activity: str | None = None
    traditional_practices: str | None = None
    community_connection: str | None = None
    notes: str | None = None


class HealthJournalEntryRead(HealthJournalEntryCreate):
    id: str
    patient_id: str
    created_at: datetime | None = None
