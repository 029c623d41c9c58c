"""Provider review routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from harmonia.application.use_cases.reviews import create_review, list_reviews
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.interfaces.api.dependencies import get_current_user
from harmonia.interfaces.api.routes_helpers import http_error_from, review_detail_to_read
from harmonia.interfaces.api.schemas import ReviewCreate, ReviewDetailRead, ReviewRead

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post("", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
def submit_review(
    payload: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ReviewRead:
    """Record a review and refresh the provider's average rating."""

    try:
        review = create_review(db, user_id=current_user.id, **payload.model_dump())
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return ReviewRead.model_validate(review)


@router.get("/{provider_id}", response_model=list[ReviewDetailRead])
def read_provider_reviews(
    provider_id: str,
    db: Session = Depends(get_db),
) -> list[ReviewDetailRead]:
    return [review_detail_to_read(detail) for detail in list_reviews(db, provider_id=provider_id)]
