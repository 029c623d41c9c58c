"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, Response, status

from harmonia.config import get_settings
from harmonia.domain.entities import (
    AppointmentDetail,
    MedicalRecordDetail,
    MessageWithParticipants,
    ProviderListing,
    ReviewDetail,
    User,
)
from harmonia.domain.errors import AccessDeniedError, ResourceNotFoundError
from harmonia.interfaces.api.schemas import (
    AppointmentDetailRead,
    AppointmentParticipantRead,
    AppointmentProviderRead,
    AppointmentRead,
    MedicalRecordDetailRead,
    MedicalRecordRead,
    MessageDetailRead,
    MessageRead,
    ProviderListingRead,
    ProviderProfileRead,
    RecordProviderRead,
    ReviewDetailRead,
    ReviewRead,
    UserSummaryRead,
)


def http_error_from(exc: ValueError) -> HTTPException:
    """Translate a use-case failure into the matching HTTP error."""

    if isinstance(exc, ResourceNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, AccessDeniedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def user_summary(user: User) -> UserSummaryRead:
    return UserSummaryRead.model_validate(user)


def provider_listing_to_read(listing: ProviderListing) -> ProviderListingRead:
    profile = ProviderProfileRead.model_validate(listing.profile)
    return ProviderListingRead(**profile.model_dump(), user=user_summary(listing.user))


def appointment_detail_to_read(detail: AppointmentDetail) -> AppointmentDetailRead:
    appointment = AppointmentRead.model_validate(detail.appointment)
    return AppointmentDetailRead(
        **appointment.model_dump(),
        patient=AppointmentParticipantRead(
            id=detail.patient.id, user=user_summary(detail.patient_user)
        ),
        provider=AppointmentProviderRead(
            id=detail.provider.id,
            specialty=detail.provider.specialty,
            user=user_summary(detail.provider_user),
        ),
    )


def message_detail_to_read(detail: MessageWithParticipants) -> MessageDetailRead:
    message = MessageRead.model_validate(detail.message)
    return MessageDetailRead(
        **message.model_dump(),
        sender=user_summary(detail.sender),
        receiver=user_summary(detail.receiver),
    )


def medical_record_detail_to_read(detail: MedicalRecordDetail) -> MedicalRecordDetailRead:
    record = MedicalRecordRead.model_validate(detail.record)
    provider = None
    if detail.provider is not None and detail.provider_user is not None:
        provider = RecordProviderRead(
            id=detail.provider.id,
            specialty=detail.provider.specialty,
            user=user_summary(detail.provider_user),
        )
    return MedicalRecordDetailRead(**record.model_dump(), provider=provider)


def review_detail_to_read(detail: ReviewDetail) -> ReviewDetailRead:
    review = ReviewRead.model_validate(detail.review)
    reviewer_name = None if detail.review.is_anonymous else detail.patient_user.display_name
    return ReviewDetailRead(**review.model_dump(), reviewer_name=reviewer_name)
