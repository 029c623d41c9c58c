"""Health journal routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from harmonia.application.use_cases.health_journal import (
    create_journal_entry,
    list_journal_entries,
)
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.interfaces.api.dependencies import get_current_user
from harmonia.interfaces.api.routes_helpers import http_error_from
from harmonia.interfaces.api.schemas import HealthJournalEntryCreate, HealthJournalEntryRead

router = APIRouter(prefix="/api/health-journal", tags=["health-journal"])


@router.post("", response_model=HealthJournalEntryRead, status_code=status.HTTP_201_CREATED)
def add_journal_entry(
    payload: HealthJournalEntryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> HealthJournalEntryRead:
    try:
        entry = create_journal_entry(db, user_id=current_user.id, data=payload.model_dump())
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return HealthJournalEntryRead.model_validate(entry)


@router.get("", response_model=list[HealthJournalEntryRead])
def read_journal_entries(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[HealthJournalEntryRead]:
    try:
        entries = list_journal_entries(db, user_id=current_user.id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return [HealthJournalEntryRead.model_validate(entry) for entry in entries]
