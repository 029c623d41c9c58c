"""Appointment booking routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from harmonia.application.use_cases.appointments import (
    create_appointment,
    list_appointments,
    update_appointment,
)
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.interfaces.api.dependencies import get_current_user
from harmonia.interfaces.api.routes_helpers import (
    appointment_detail_to_read,
    http_error_from,
)
from harmonia.interfaces.api.schemas import (
    AppointmentCreate,
    AppointmentDetailRead,
    AppointmentRead,
    AppointmentUpdate,
)

router = APIRouter(prefix="/api/appointments", tags=["appointments"])


@router.post("", response_model=AppointmentRead, status_code=status.HTTP_201_CREATED)
def book_appointment(
    payload: AppointmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AppointmentRead:
    try:
        appointment = create_appointment(db, user=current_user, **payload.model_dump())
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return AppointmentRead.model_validate(appointment)


@router.get("", response_model=list[AppointmentDetailRead])
def read_appointments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[AppointmentDetailRead]:
    """Return the caller's appointments, earliest first."""

    try:
        details = list_appointments(db, user=current_user)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return [appointment_detail_to_read(detail) for detail in details]


@router.put("/{appointment_id}", response_model=AppointmentRead)
def edit_appointment(
    appointment_id: str,
    payload: AppointmentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AppointmentRead:
    try:
        appointment = update_appointment(
            db,
            appointment_id=appointment_id,
            user=current_user,
            changes=payload.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return AppointmentRead.model_validate(appointment)
