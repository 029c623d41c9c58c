"""Administrator dashboards."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from harmonia.application.use_cases.admin import get_user_stats, list_users_with_profiles
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.interfaces.api.dependencies import require_admin
from harmonia.interfaces.api.schemas import AdminUserRead, UserRead, UserStatsRead

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/users", response_model=list[AdminUserRead])
def read_all_users(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[AdminUserRead]:
    results: list[AdminUserRead] = []
    for entry in list_users_with_profiles(db):
        user = UserRead.model_validate(entry.user)
        results.append(
            AdminUserRead(
                **user.model_dump(),
                has_patient_profile=entry.patient_profile is not None,
                has_provider_profile=entry.provider_profile is not None,
            )
        )
    return results


@router.get("/stats", response_model=UserStatsRead)
def read_user_stats(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> UserStatsRead:
    return UserStatsRead.model_validate(get_user_stats(db))
