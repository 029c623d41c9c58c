"""Domain entity representing an uploaded medical record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

RECORD_TYPES = (
    "lab_result",
    "prescription",
    "imaging",
    "consultation_note",
    "other",
)


@dataclass
class MedicalRecord:
    """Document filed against a patient, optionally by a provider."""

    id: str | None
    patient_id: str
    title: str
    record_type: str
    record_date: datetime
    provider_id: str | None = None
    description: str | None = None
    file_url: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    created_at: datetime | None = None


__all__ = ["MedicalRecord", "RECORD_TYPES"]
