"""Use cases for the patient health journal."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Mapping

from sqlalchemy.orm import Session

from harmonia.domain.entities import HealthJournalEntry
from harmonia.infrastructure.repositories import HealthJournalRepository

from .profiles import get_patient_profile

JOURNAL_PAGE_SIZE = 30


def create_journal_entry(
    session: Session, *, user_id: str, data: Mapping[str, Any]
) -> HealthJournalEntry:
    patient = get_patient_profile(session, user_id)
    entry = HealthJournalEntry(id=None, patient_id=patient.id, **dict(data))
    return HealthJournalRepository(session).create(entry)


def list_journal_entries(session: Session, *, user_id: str) -> Sequence[HealthJournalEntry]:
    """Return the caller's most recent journal entries, newest first."""

    patient = get_patient_profile(session, user_id)
    return HealthJournalRepository(session).list_for_patient(
        patient.id, limit=JOURNAL_PAGE_SIZE
    )


__all__ = ["create_journal_entry", "list_journal_entries", "JOURNAL_PAGE_SIZE"]
