"""Provider onboarding, profile, discovery and analytics routes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from harmonia.application.use_cases.analytics import get_provider_analytics
from harmonia.application.use_cases.profiles import (
    get_provider_profile,
    onboard_provider,
    update_provider_profile,
)
from harmonia.application.use_cases.providers import search_providers
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.interfaces.api.dependencies import get_current_user, require_provider
from harmonia.interfaces.api.routes_helpers import (
    http_error_from,
    provider_listing_to_read,
)
from harmonia.interfaces.api.schemas import (
    ProviderAnalyticsRead,
    ProviderListingRead,
    ProviderProfileCreate,
    ProviderProfileRead,
    ProviderProfileUpdate,
)

router = APIRouter(prefix="/api", tags=["providers"])


@router.post(
    "/provider/onboarding",
    response_model=ProviderProfileRead,
    status_code=status.HTTP_201_CREATED,
)
def complete_provider_onboarding(
    payload: ProviderProfileCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProviderProfileRead:
    try:
        profile = onboard_provider(db, user=current_user, data=payload.model_dump())
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ProviderProfileRead.model_validate(profile)


@router.get("/provider/profile", response_model=ProviderProfileRead)
def read_provider_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProviderProfileRead:
    try:
        profile = get_provider_profile(db, current_user.id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ProviderProfileRead.model_validate(profile)


@router.put("/provider/profile", response_model=ProviderProfileRead)
def edit_provider_profile(
    payload: ProviderProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ProviderProfileRead:
    try:
        profile = update_provider_profile(
            db, user_id=current_user.id, changes=payload.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ProviderProfileRead.model_validate(profile)


@router.get("/providers/search", response_model=list[ProviderListingRead])
def search_provider_directory(
    specialty: str | None = Query(None),
    cultural_background: str | None = Query(None, alias="culturalBackground"),
    language: str | None = Query(None),
    location: str | None = Query(None),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[ProviderListingRead]:
    """Return verified providers matching every supplied filter."""

    listings = search_providers(
        db,
        specialty=specialty,
        cultural_background=cultural_background,
        language=language,
        location=location,
    )
    return [provider_listing_to_read(listing) for listing in listings]


@router.get("/provider/analytics", response_model=ProviderAnalyticsRead)
def read_provider_analytics(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_provider),
) -> ProviderAnalyticsRead:
    try:
        analytics = get_provider_analytics(db, user_id=current_user.id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ProviderAnalyticsRead.model_validate(analytics)
