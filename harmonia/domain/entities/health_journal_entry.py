"""Domain entity representing a daily health journal entry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class HealthJournalEntry:
    """Biometrics and wellbeing notes recorded by a patient."""

    id: str | None
    patient_id: str
    entry_date: datetime
    blood_pressure_systolic: int | None = None
    blood_pressure_diastolic: int | None = None
    blood_glucose: int | None = None
    weight: Decimal | None = None
    weight_unit: str = "lbs"
    mood: str | None = None
    sleep_hours: Decimal | None = None
    sleep_quality: str | None = None
    physical_activity: str | None = None
    traditional_practices: str | None = None
    community_connection: str | None = None
    notes: str | None = None
    created_at: datetime | None = None


__all__ = ["HealthJournalEntry"]
