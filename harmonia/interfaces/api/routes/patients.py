"""Patient onboarding and profile routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from harmonia.application.use_cases.profiles import (
    get_patient_profile,
    onboard_patient,
    update_patient_profile,
)
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.interfaces.api.dependencies import get_current_user
from harmonia.interfaces.api.routes_helpers import http_error_from
from harmonia.interfaces.api.schemas import (
    PatientProfileCreate,
    PatientProfileRead,
    PatientProfileUpdate,
)

router = APIRouter(prefix="/api/patient", tags=["patients"])


@router.post(
    "/onboarding", response_model=PatientProfileRead, status_code=status.HTTP_201_CREATED
)
def complete_patient_onboarding(
    payload: PatientProfileCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PatientProfileRead:
    try:
        profile = onboard_patient(db, user=current_user, data=payload.model_dump())
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return PatientProfileRead.model_validate(profile)


@router.get("/profile", response_model=PatientProfileRead)
def read_patient_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PatientProfileRead:
    try:
        profile = get_patient_profile(db, current_user.id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return PatientProfileRead.model_validate(profile)


@router.put("/profile", response_model=PatientProfileRead)
def edit_patient_profile(
    payload: PatientProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PatientProfileRead:
    """Apply the fields present in the request to the caller's profile."""

    try:
        profile = update_patient_profile(
            db, user_id=current_user.id, changes=payload.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return PatientProfileRead.model_validate(profile)
